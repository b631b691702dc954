"""Excel export of flattened collection fields."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from field_flattener.configuration.runtime_settings import Configuration
from field_flattener.field_index.collection_projection import ProjectedCollection

from .constants import CONFIGURATION_SHEET_NAME, FIELD_COLUMNS, MAX_SHEET_TITLE_LENGTH


def generate_field_workbook(
    configuration: Configuration,
    collections: Sequence[ProjectedCollection],
    output_path: Path | str,
) -> Path:
    """Write one sheet per collection listing its flattened fields."""
    workbook = Workbook()
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    used_titles = {CONFIGURATION_SHEET_NAME.lower()}
    for collection in collections:
        sheet = workbook.create_sheet(_sheet_title(collection.slug, used_titles))
        _write_field_rows(sheet, collection)

    _write_configuration_sheet(workbook, configuration)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path.resolve()


def _sheet_title(slug: str, used_titles: set[str]) -> str:
    """Return a valid sheet title for ``slug`` not yet in ``used_titles``.

    Excel compares titles case-insensitively and limits them to 31 characters, so
    the base title is shortened before a numeric suffix is appended.
    """
    # Excel forbids these characters in sheet titles.
    cleaned = "".join("_" if char in "[]:*?/\\" else char for char in slug)
    base = cleaned[:MAX_SHEET_TITLE_LENGTH]
    title = base
    counter = 1
    while title.lower() in used_titles:
        suffix = str(counter)
        title = base[: MAX_SHEET_TITLE_LENGTH - len(suffix)] + suffix
        counter += 1
    used_titles.add(title.lower())
    return title

def _write_field_rows(sheet: Worksheet, collection: ProjectedCollection) -> None:
    for column_index, name in enumerate(FIELD_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name)
        sheet[f"{get_column_letter(column_index)}1"].style = "Headline 4"

    for row_index, descriptor in enumerate(collection.descriptors, start=2):
        values = (
            descriptor.position,
            descriptor.name,
            descriptor.field_type,
            descriptor.kind,
            descriptor.label,
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    for column_index in range(1, len(FIELD_COLUMNS) + 1):
        letter = get_column_letter(column_index)
        longest = max(
            (len(str(cell.value)) for cell in sheet[letter] if cell.value is not None),
            default=0,
        )
        sheet.column_dimensions[letter].width = max(12, min(longest + 4, 40))


def _write_configuration_sheet(workbook: Workbook, configuration: Configuration) -> None:
    sheet = workbook.create_sheet(CONFIGURATION_SHEET_NAME)
    config_hash = hashlib.sha256(configuration.text.encode("utf-8")).hexdigest()
    entries = [
        ("config_path", str(configuration.path.resolve())),
        ("config_hash", config_hash),
        ("include_presentational", configuration.flattening.include_presentational),
        ("strict", configuration.flattening.strict),
        ("shape", configuration.flattening.shape),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)

"""Field sheet generation exports."""

from .constants import CONFIGURATION_SHEET_NAME, FIELD_COLUMNS
from .field_workbook_builder import generate_field_workbook

__all__ = [
    "CONFIGURATION_SHEET_NAME",
    "FIELD_COLUMNS",
    "generate_field_workbook",
]

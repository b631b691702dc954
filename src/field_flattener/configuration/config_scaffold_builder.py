"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "fields.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Field flattening configuration for field-flattener.
# Replace every <REQUIRED> placeholder before running flatten or export-sheet.
# Replace <OPTIONAL> placeholders only when your setup needs them.

flattening:
  # Keep UI-only fields (type: ui) in the flattened output.
  include_presentational: false
  # Report field definitions that were dropped because they were not recognized.
  strict: false
  # Field representation to read: definition (as authored) or client (render-time).
  shape: definition

collections:
  - slug: "<REQUIRED>"
    # Provide either inline field definitions or a path to a YAML/JSON file.
    fields:
      - type: text
        name: "<REQUIRED>"
      - type: tabs
        tabs:
          # Named tabs store their contents under the tab name.
          - name: "<OPTIONAL>"
            fields: []
          # Unnamed tabs only group fields in the admin UI.
          - label: "<OPTIONAL>"
            fields: []
  # - slug: "<OPTIONAL>"
  #   path: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()

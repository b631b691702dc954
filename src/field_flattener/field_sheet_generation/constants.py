"""Shared field sheet constants."""

from __future__ import annotations

CONFIGURATION_SHEET_NAME = "Configuration"
MAX_SHEET_TITLE_LENGTH = 31

FIELD_COLUMNS: tuple[str, ...] = ("Position", "Name", "Type", "Kind", "Label")

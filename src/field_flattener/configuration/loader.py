"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from field_flattener.field_model import SHAPE_NAMES

from .runtime_settings import CollectionSchema, Configuration, FlatteningSettings

_LOGGER = logging.getLogger("field_flattener.configuration")
_LOGGER.addHandler(logging.NullHandler())


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file.

    Only the structure around the field trees is validated. Field definitions
    themselves are passed through untouched.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = _read_text(path, "configuration file")
    parsed = _parse_yaml(text, f"configuration file {path}")
    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    flattening = _parse_flattening_section(parsed.get("flattening"))
    collections = _parse_collections_section(parsed.get("collections"), path.parent)
    _LOGGER.debug("Loaded %d collection(s) from %s", len(collections), path)

    return Configuration(
        path=path,
        text=text,
        flattening=flattening,
        collections=collections,
    )


def _parse_flattening_section(value: Any) -> FlatteningSettings:
    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'flattening' must be a mapping.")
    include_presentational = _optional_bool(
        value.get("include_presentational"), "flattening.include_presentational"
    )
    strict = _optional_bool(value.get("strict"), "flattening.strict")
    shape = value.get("shape", "definition")
    if shape not in SHAPE_NAMES:
        raise ConfigurationError(
            f"flattening.shape must be one of: {', '.join(SHAPE_NAMES)}."
        )
    return FlatteningSettings(
        include_presentational=include_presentational,
        strict=strict,
        shape=shape,
    )


def _parse_collections_section(value: Any, base_path: Path) -> tuple[CollectionSchema, ...]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise ConfigurationError("Configuration section 'collections' must be a list.")
    if not value:
        raise ConfigurationError("Configuration section 'collections' must not be empty.")

    collections: list[CollectionSchema] = []
    seen_slugs: set[str] = set()
    for index, entry in enumerate(value):
        label = f"collections[{index}]"
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"{label} must be a mapping.")
        slug = _require_non_empty_string(entry.get("slug"), f"{label}.slug")
        if slug in seen_slugs:
            raise ConfigurationError(f"Duplicate collection slug: {slug}")
        seen_slugs.add(slug)
        fields, source_path = _load_field_definitions(entry, base_path, label)
        collections.append(CollectionSchema(slug=slug, fields=fields, source_path=source_path))
    return tuple(collections)


def _load_field_definitions(
    entry: Mapping[str, Any], base_path: Path, label: str
) -> tuple[tuple[Any, ...], Path | None]:
    inline = entry.get("fields")
    path_value = entry.get("path")
    if inline is not None and path_value is not None:
        raise ConfigurationError(f"{label} must not set both fields and path.")
    if inline is not None:
        return _require_field_list(inline, f"{label}.fields"), None
    if path_value is not None:
        if not isinstance(path_value, str) or not path_value.strip():
            raise ConfigurationError(f"{label}.path must be a non-empty string.")
        fields_path = _resolve_path(base_path, path_value.strip())
        if not fields_path.exists():
            raise ConfigurationError(f"Field definition file not found: {fields_path}")
        fields_text = _read_text(fields_path, "field definition file")
        parsed = _parse_yaml(fields_text, f"field definition file {fields_path}")
        if isinstance(parsed, Mapping):
            parsed = parsed.get("fields")
        return _require_field_list(parsed, f"{label}.path"), fields_path
    raise ConfigurationError(f"{label} requires either fields or path.")


def _read_text(path: Path, source: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read {source} {path}: {exc}") from exc


def _parse_yaml(text: str, source: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {source}: {exc}") from exc


def _require_field_list(value: Any, field_name: str) -> tuple[Any, ...]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise ConfigurationError(f"{field_name} must contain a list of field definitions.")
    return tuple(value)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value

"""Accessors that let one traversal read both field representations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .field_models import GROUP_LIKE_TYPES, PRESENTATIONAL_TYPES, TABS_TYPE, FieldKind


class FieldShape(Protocol):
    """Read-only view over one field representation.

    Accessors are also used for tabs, which share the ``name``/``label``/``fields``
    members with fields. None of them raise: missing or wrong-typed members read
    as ``None``.
    """

    def type_of(self, node: Any) -> str | None: ...

    def name_of(self, node: Any) -> str | None: ...

    def label_of(self, node: Any) -> str | None: ...

    def children_of(self, node: Any) -> Sequence[Any] | None: ...

    def tabs_of(self, node: Any) -> Sequence[Any] | None: ...


class MappingFieldShape:
    """Definition-time fields authored as plain mappings."""

    def type_of(self, node: Any) -> str | None:
        return _as_text(_member(node, "type"))

    def name_of(self, node: Any) -> str | None:
        return _as_text(_member(node, "name"))

    def label_of(self, node: Any) -> str | None:
        return _as_text(_member(node, "label"))

    def children_of(self, node: Any) -> Sequence[Any] | None:
        return _as_sequence(_member(node, "fields"))

    def tabs_of(self, node: Any) -> Sequence[Any] | None:
        return _as_sequence(_member(node, "tabs"))


class AttributeFieldShape:
    """Render-time fields exposed as objects with attributes."""

    def type_of(self, node: Any) -> str | None:
        return _as_text(getattr(node, "type", None))

    def name_of(self, node: Any) -> str | None:
        return _as_text(getattr(node, "name", None))

    def label_of(self, node: Any) -> str | None:
        return _as_text(getattr(node, "label", None))

    def children_of(self, node: Any) -> Sequence[Any] | None:
        return _as_sequence(getattr(node, "fields", None))

    def tabs_of(self, node: Any) -> Sequence[Any] | None:
        return _as_sequence(getattr(node, "tabs", None))


DEFINITION_SHAPE: FieldShape = MappingFieldShape()
CLIENT_SHAPE: FieldShape = AttributeFieldShape()

_SHAPES_BY_NAME: Mapping[str, FieldShape] = {
    "definition": DEFINITION_SHAPE,
    "client": CLIENT_SHAPE,
}
SHAPE_NAMES: tuple[str, ...] = tuple(_SHAPES_BY_NAME)


def shape_for(name: str) -> FieldShape:
    """Return the shape registered under ``name``."""
    try:
        return _SHAPES_BY_NAME[name]
    except KeyError as exc:
        raise ValueError(f"Unknown field shape: {name}") from exc


def classify_field(node: Any, shape: FieldShape) -> FieldKind:
    """Classify one field node into its kind."""
    field_type = shape.type_of(node)
    if field_type in PRESENTATIONAL_TYPES:
        return FieldKind.PRESENTATIONAL_FIELD
    if shape.name_of(node):
        return FieldKind.DATA_FIELD
    if field_type in GROUP_LIKE_TYPES and shape.children_of(node) is not None:
        return FieldKind.GROUP_LIKE
    if field_type == TABS_TYPE and shape.tabs_of(node) is not None:
        return FieldKind.TABS
    return FieldKind.UNRECOGNIZED


def _member(node: Any, key: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(key)
    return None


def _as_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _as_sequence(value: Any) -> Sequence[Any] | None:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return value
    return None

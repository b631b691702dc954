"""Lookups and ordered descriptors built from flattened leaves."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from field_flattener.field_model import (
    DEFINITION_SHAPE,
    FieldKind,
    FieldShape,
    TabLeaf,
    classify_field,
)

from .field_descriptors import FieldDescriptor


class FieldIndexError(Exception):
    """Raised when flattened leaves cannot be indexed by name."""


def build_field_lookup(
    leaves: Sequence[Any], *, shape: FieldShape = DEFINITION_SHAPE
) -> dict[str, Any]:
    """Map storage names to leaves, skipping presentational fields."""
    lookup: dict[str, Any] = {}
    for leaf in leaves:
        name = _leaf_name(leaf, shape)
        if name is None or _leaf_kind(leaf, shape) == "presentational":
            continue
        if name in lookup:
            raise FieldIndexError(f"Duplicate flattened field detected: {name}")
        lookup[name] = leaf
    return lookup


def describe_fields(
    leaves: Sequence[Any], *, shape: FieldShape = DEFINITION_SHAPE
) -> list[FieldDescriptor]:
    """Return one descriptor per leaf, in render order."""
    return [
        FieldDescriptor(
            position=position,
            name=_leaf_name(leaf, shape),
            field_type=leaf.type if isinstance(leaf, TabLeaf) else shape.type_of(leaf),
            kind=_leaf_kind(leaf, shape),
            label=leaf.label if isinstance(leaf, TabLeaf) else shape.label_of(leaf),
        )
        for position, leaf in enumerate(leaves, start=1)
    ]


def _leaf_name(leaf: Any, shape: FieldShape) -> str | None:
    if isinstance(leaf, TabLeaf):
        return leaf.name
    return shape.name_of(leaf)


def _leaf_kind(leaf: Any, shape: FieldShape) -> str:
    if isinstance(leaf, TabLeaf):
        return "tab"
    if classify_field(leaf, shape) is FieldKind.PRESENTATIONAL_FIELD:
        return "presentational"
    return "data"

"""Field flattening service.

Turns a nested field-definition tree into the ordered list of leaves that carry
stored data, optionally keeping presentational-only fields. Rows, collapsibles,
unnamed groups and unnamed tabs are transparent: their children are spliced in
place. A named tab stores its contents as one nested value, so it is emitted as a
single :class:`TabLeaf` and its fields are not visited.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .field_models import (
    GROUP_LIKE_TYPES,
    TABS_TYPE,
    FieldKind,
    FlattenReport,
    SchemaDiagnostic,
    TabLeaf,
)
from .field_shapes import DEFINITION_SHAPE, FieldShape, classify_field

_LOGGER = logging.getLogger("field_flattener.field_model")
_LOGGER.addHandler(logging.NullHandler())


def flatten_fields(
    fields: Sequence[Any],
    include_presentational: bool = False,
    *,
    shape: FieldShape = DEFINITION_SHAPE,
) -> list[Any]:
    """Return the data-bearing leaves of ``fields`` in document order.

    Data and presentational leaves are the input objects themselves. Nodes that
    cannot be classified contribute nothing.
    """
    leaves: list[Any] = []
    _flatten_into(fields, include_presentational, shape, "fields", leaves, None)
    return leaves


def inspect_fields(
    fields: Sequence[Any],
    include_presentational: bool = False,
    *,
    shape: FieldShape = DEFINITION_SHAPE,
) -> FlattenReport:
    """Flatten ``fields`` and report every node that was silently dropped."""
    leaves: list[Any] = []
    diagnostics: list[SchemaDiagnostic] = []
    _flatten_into(fields, include_presentational, shape, "fields", leaves, diagnostics)
    for diagnostic in diagnostics:
        _LOGGER.warning("%s: %s", diagnostic.path, diagnostic.message)
    return FlattenReport(leaves=tuple(leaves), diagnostics=tuple(diagnostics))


def _flatten_into(
    fields: Any,
    include_presentational: bool,
    shape: FieldShape,
    path: str,
    leaves: list[Any],
    diagnostics: list[SchemaDiagnostic] | None,
) -> None:
    if not isinstance(fields, Sequence) or isinstance(fields, (str, bytes)):
        _note(diagnostics, path, "field list is not a sequence")
        return

    for index, node in enumerate(fields):
        node_path = f"{path}[{index}]"
        kind = classify_field(node, shape)
        if kind is FieldKind.DATA_FIELD:
            leaves.append(node)
        elif kind is FieldKind.PRESENTATIONAL_FIELD:
            if include_presentational:
                leaves.append(node)
        elif kind is FieldKind.GROUP_LIKE:
            _flatten_into(
                shape.children_of(node),
                include_presentational,
                shape,
                f"{node_path}.fields",
                leaves,
                diagnostics,
            )
        elif kind is FieldKind.TABS:
            _flatten_tabs(
                shape.tabs_of(node) or (),
                include_presentational,
                shape,
                f"{node_path}.tabs",
                leaves,
                diagnostics,
            )
        else:
            _note(diagnostics, node_path, _describe_unrecognized(node, shape))


def _flatten_tabs(
    tabs: Sequence[Any],
    include_presentational: bool,
    shape: FieldShape,
    path: str,
    leaves: list[Any],
    diagnostics: list[SchemaDiagnostic] | None,
) -> None:
    for index, tab in enumerate(tabs):
        tab_path = f"{path}[{index}]"
        name = shape.name_of(tab)
        if name:
            leaves.append(TabLeaf(name=name, label=shape.label_of(tab)))
            continue
        children = shape.children_of(tab)
        if children is None:
            _note(diagnostics, tab_path, "tab has neither a name nor fields")
            continue
        _flatten_into(
            children, include_presentational, shape, f"{tab_path}.fields", leaves, diagnostics
        )


def _describe_unrecognized(node: Any, shape: FieldShape) -> str:
    field_type = shape.type_of(node)
    if field_type is None:
        return "field has no type and no name"
    if field_type == TABS_TYPE:
        return "tabs field has no tab list"
    if field_type in GROUP_LIKE_TYPES:
        return f"{field_type} field has no child fields"
    return f"unrecognized field of type '{field_type}'"


def _note(diagnostics: list[SchemaDiagnostic] | None, path: str, message: str) -> None:
    if diagnostics is not None:
        diagnostics.append(SchemaDiagnostic(path=path, message=message))

"""Field model exports."""

from .client_fields import build_client_fields
from .field_flattening import flatten_fields, inspect_fields
from .field_models import (
    ClientField,
    ClientTab,
    FieldKind,
    FlattenReport,
    SchemaDiagnostic,
    TabLeaf,
)
from .field_shapes import (
    CLIENT_SHAPE,
    DEFINITION_SHAPE,
    SHAPE_NAMES,
    FieldShape,
    classify_field,
    shape_for,
)

__all__ = [
    "CLIENT_SHAPE",
    "DEFINITION_SHAPE",
    "SHAPE_NAMES",
    "ClientField",
    "ClientTab",
    "FieldKind",
    "FieldShape",
    "FlattenReport",
    "SchemaDiagnostic",
    "TabLeaf",
    "build_client_fields",
    "classify_field",
    "flatten_fields",
    "inspect_fields",
    "shape_for",
]

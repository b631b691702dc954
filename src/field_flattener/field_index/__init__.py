"""Field index exports."""

from .collection_projection import ProjectedCollection, project_collection
from .field_descriptors import FieldDescriptor
from .field_lookup import FieldIndexError, build_field_lookup, describe_fields

__all__ = [
    "FieldDescriptor",
    "FieldIndexError",
    "ProjectedCollection",
    "build_field_lookup",
    "describe_fields",
    "project_collection",
]

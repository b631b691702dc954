"""Projection of configured collections into flattened field indexes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from field_flattener.configuration.runtime_settings import CollectionSchema, FlatteningSettings
from field_flattener.field_model import (
    SchemaDiagnostic,
    build_client_fields,
    flatten_fields,
    inspect_fields,
    shape_for,
)

from .field_descriptors import FieldDescriptor
from .field_lookup import build_field_lookup, describe_fields


@dataclass(frozen=True)
class ProjectedCollection:
    """Flattened view of one collection."""

    slug: str
    leaves: tuple[Any, ...]
    lookup: Mapping[str, Any]
    descriptors: tuple[FieldDescriptor, ...]
    diagnostics: tuple[SchemaDiagnostic, ...]


def project_collection(
    collection: CollectionSchema, settings: FlatteningSettings
) -> ProjectedCollection:
    """Flatten one collection and index its leaves.

    Raises:
      FieldIndexError: If two leaves share a storage name.
    """
    shape = shape_for(settings.shape)
    fields: tuple[Any, ...] = collection.fields
    if settings.shape == "client":
        fields = build_client_fields(collection.fields)

    if settings.strict:
        report = inspect_fields(fields, settings.include_presentational, shape=shape)
        leaves, diagnostics = report.leaves, report.diagnostics
    else:
        leaves = tuple(flatten_fields(fields, settings.include_presentational, shape=shape))
        diagnostics = ()

    return ProjectedCollection(
        slug=collection.slug,
        leaves=leaves,
        lookup=build_field_lookup(leaves, shape=shape),
        descriptors=tuple(describe_fields(leaves, shape=shape)),
        diagnostics=diagnostics,
    )

"""Collection projection tests."""

from __future__ import annotations

import pytest
from field_flattener.configuration import CollectionSchema, FlatteningSettings
from field_flattener.field_index import FieldIndexError, project_collection
from field_flattener.field_model import ClientField, TabLeaf


def _collection() -> CollectionSchema:
    return CollectionSchema(
        slug="posts",
        fields=(
            {"type": "text", "name": "title"},
            {"type": "row", "fields": [{"type": "text", "name": "subtitle"}, {"type": "ui"}]},
            {"type": "tabs", "tabs": [{"name": "seo"}, {"fields": [{"type": "upload"}]}]},
        ),
        source_path=None,
    )


def _settings(**overrides: object) -> FlatteningSettings:
    values: dict[str, object] = {
        "include_presentational": False,
        "strict": False,
        "shape": "definition",
    }
    values.update(overrides)
    return FlatteningSettings(**values)  # type: ignore[arg-type]


def test_projects_definition_shape_without_diagnostics() -> None:
    projected = project_collection(_collection(), _settings())

    assert projected.slug == "posts"
    assert [descriptor.name for descriptor in projected.descriptors] == [
        "title",
        "subtitle",
        "seo",
    ]
    assert projected.lookup["seo"] == TabLeaf(name="seo")
    assert projected.diagnostics == ()


def test_strict_projection_reports_dropped_nodes() -> None:
    projected = project_collection(_collection(), _settings(strict=True))

    assert [(item.path, item.message) for item in projected.diagnostics] == [
        ("fields[2].tabs[1].fields[0]", "unrecognized field of type 'upload'"),
    ]


def test_client_projection_emits_client_fields() -> None:
    projected = project_collection(
        _collection(), _settings(shape="client", include_presentational=True)
    )

    assert [descriptor.kind for descriptor in projected.descriptors] == [
        "data",
        "data",
        "presentational",
        "tab",
    ]
    assert isinstance(projected.leaves[0], ClientField)


def test_duplicate_names_fail_projection() -> None:
    collection = CollectionSchema(
        slug="pages",
        fields=({"type": "text", "name": "slug"}, {"type": "text", "name": "slug"}),
        source_path=None,
    )

    with pytest.raises(FieldIndexError):
        project_collection(collection, _settings())

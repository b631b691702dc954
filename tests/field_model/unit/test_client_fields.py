"""Render-time field conversion tests."""

from __future__ import annotations

import copy

from field_flattener.field_model import (
    CLIENT_SHAPE,
    DEFINITION_SHAPE,
    ClientField,
    ClientTab,
    FieldKind,
    build_client_fields,
    classify_field,
)


def test_builds_nested_client_fields_without_server_only_settings() -> None:
    definitions = [
        {
            "type": "text",
            "name": "title",
            "label": "Title",
            "hooks": {"beforeChange": ["trim"]},
            "admin": {"position": "sidebar", "custom": {"x": 1}},
        },
        {
            "type": "tabs",
            "tabs": [
                {"name": "seo", "label": "SEO", "fields": [{"type": "text", "name": "meta"}]},
                {"label": "Layout", "fields": [{"type": "ui", "label": "hint"}]},
            ],
        },
    ]
    snapshot = copy.deepcopy(definitions)

    client_fields = build_client_fields(definitions)

    assert client_fields == (
        ClientField(type="text", name="title", label="Title", admin={"position": "sidebar"}),
        ClientField(
            type="tabs",
            tabs=(
                ClientTab(
                    name="seo",
                    label="SEO",
                    fields=(ClientField(type="text", name="meta"),),
                ),
                ClientTab(label="Layout", fields=(ClientField(type="ui", label="hint"),)),
            ),
        ),
    )
    assert definitions == snapshot


def test_skips_entries_that_are_not_mappings() -> None:
    assert build_client_fields([{"type": "text", "name": "a"}, "b", None]) == (
        ClientField(type="text", name="a"),
    )
    assert build_client_fields("not-a-list") == ()  # type: ignore[arg-type]


def test_absent_tab_list_stays_absent_in_client_shape() -> None:
    (client_field,) = build_client_fields([{"type": "tabs"}])

    assert client_field.tabs is None
    assert classify_field(client_field, CLIENT_SHAPE) is FieldKind.UNRECOGNIZED


def test_both_shapes_classify_the_same_taxonomy() -> None:
    definitions = [
        {"type": "text", "name": "title"},
        {"type": "ui"},
        {"type": "row", "fields": []},
        {"type": "tabs", "tabs": []},
        {"type": "unknown"},
    ]
    client_fields = build_client_fields(definitions)

    definition_kinds = [classify_field(item, DEFINITION_SHAPE) for item in definitions]
    client_kinds = [classify_field(item, CLIENT_SHAPE) for item in client_fields]

    assert definition_kinds == client_kinds == [
        FieldKind.DATA_FIELD,
        FieldKind.PRESENTATIONAL_FIELD,
        FieldKind.GROUP_LIKE,
        FieldKind.TABS,
        FieldKind.UNRECOGNIZED,
    ]


def test_client_fields_are_hashable_despite_admin_options() -> None:
    definitions = [
        {"type": "text", "name": "title", "admin": {"condition": {"equals": ["a"]}}},
        {"type": "tabs", "tabs": [{"name": "seo", "fields": [{"type": "text", "name": "meta"}]}]},
    ]

    first = build_client_fields(definitions)
    second = build_client_fields(definitions)

    assert len({*first, *second}) == 2
    assert hash(first[0]) == hash(second[0])
    assert {first[1]: "tabs"}[second[1]] == "tabs"

"""Conversion of definition-time fields into the render-time shape."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .field_models import ClientField, ClientTab

SERVER_ONLY_KEYS: frozenset[str] = frozenset(
    {"hooks", "access", "validate", "custom", "defaultValue"}
)


def build_client_fields(definitions: Sequence[Any]) -> tuple[ClientField, ...]:
    """Build render-time fields from definition-time mappings.

    Server-only settings are dropped and entries that are not mappings are
    skipped. The input is left untouched.
    """
    if not isinstance(definitions, Sequence) or isinstance(definitions, (str, bytes)):
        return ()
    return tuple(
        _build_client_field(definition)
        for definition in definitions
        if isinstance(definition, Mapping)
    )


def _build_client_field(definition: Mapping[str, Any]) -> ClientField:
    children = definition.get("fields")
    tabs = definition.get("tabs")
    admin = definition.get("admin")
    return ClientField(
        type=_optional_text(definition.get("type")),
        name=_optional_text(definition.get("name")),
        label=_optional_text(definition.get("label")),
        fields=build_client_fields(children) if _is_list(children) else None,
        tabs=_build_client_tabs(tabs) if _is_list(tabs) else None,
        admin={
            key: value
            for key, value in (admin.items() if isinstance(admin, Mapping) else ())
            if key not in SERVER_ONLY_KEYS
        },
    )


def _build_client_tabs(tabs: Sequence[Any]) -> tuple[ClientTab, ...]:
    client_tabs = []
    for tab in tabs:
        if not isinstance(tab, Mapping):
            continue
        children = tab.get("fields")
        client_tabs.append(
            ClientTab(
                name=_optional_text(tab.get("name")),
                label=_optional_text(tab.get("label")),
                fields=build_client_fields(children) if _is_list(children) else None,
            )
        )
    return tuple(client_tabs)


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _optional_text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None

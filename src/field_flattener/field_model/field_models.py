"""Field model entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

PRESENTATIONAL_TYPES: frozenset[str] = frozenset({"ui"})
GROUP_LIKE_TYPES: frozenset[str] = frozenset({"row", "collapsible", "group", "array"})
TABS_TYPE = "tabs"
TAB_LEAF_TYPE = "tab"


class FieldKind(str, Enum):
    """Closed set of field definition kinds seen by the flattener."""

    DATA_FIELD = "data-field"
    PRESENTATIONAL_FIELD = "presentational-field"
    GROUP_LIKE = "group-like"
    TABS = "tabs"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class TabLeaf:
    """Synthetic leaf emitted in place of a named tab."""

    name: str
    label: str | None = None

    @property
    def type(self) -> str:
        """Return the fixed tab discriminator."""
        return TAB_LEAF_TYPE


@dataclass(frozen=True)
class ClientTab:
    """Render-time tab definition."""

    name: str | None = None
    label: str | None = None
    fields: tuple[ClientField, ...] | None = None


@dataclass(frozen=True)
class ClientField:
    """Render-time field definition stripped of server-only settings."""

    type: str | None
    name: str | None = None
    label: str | None = None
    fields: tuple[ClientField, ...] | None = None
    tabs: tuple[ClientTab, ...] | None = None
    # Admin options may hold unhashable values and are left out of the hash.
    admin: Mapping[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class SchemaDiagnostic:
    """Note about a node that contributed nothing to the flattened output."""

    path: str
    message: str


@dataclass(frozen=True)
class FlattenReport:
    """Flattened leaves together with strict-mode diagnostics."""

    leaves: tuple[Any, ...]
    diagnostics: tuple[SchemaDiagnostic, ...]

    @property
    def is_clean(self) -> bool:
        """Return True when every node was recognized."""
        return not self.diagnostics

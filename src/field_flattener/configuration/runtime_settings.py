"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class FlatteningSettings:
    """Options applied when flattening every configured collection."""

    include_presentational: bool
    strict: bool
    shape: str


@dataclass(frozen=True)
class CollectionSchema:
    """Field definitions of one content collection."""

    slug: str
    fields: tuple[Any, ...]
    source_path: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    text: str
    flattening: FlatteningSettings
    collections: tuple[CollectionSchema, ...]

    def collection(self, slug: str) -> CollectionSchema | None:
        """Return the collection registered under ``slug``."""
        for candidate in self.collections:
            if candidate.slug == slug:
                return candidate
        return None

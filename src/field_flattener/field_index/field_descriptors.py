"""Field index entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldDescriptor:
    """Flattened leaf summarized for rendering and export."""

    position: int
    name: str | None
    field_type: str | None
    kind: str
    label: str | None

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""
        return {
            "position": self.position,
            "name": self.name,
            "type": self.field_type,
            "kind": self.kind,
            "label": self.label,
        }

"""Combine a resolved property with its documentation for display."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .catalog import DocumentationCatalog, default_catalog
from .models import DocumentationEntry, ResolvedProperty

_MISSING_ENUM_DESCRIPTION = "No description available"


@dataclass(frozen=True)
class PropertyDetails:
    """Everything a presentation layer needs to describe one property."""

    key: str
    value: str
    entry: DocumentationEntry

    @property
    def type_info(self) -> str:
        if self.entry.enum:
            return f"{self.entry.value_type} ({' | '.join(self.entry.enum)})"
        return self.entry.value_type

    def description_lines(self, width: int = 50, limit: int = 3) -> List[str]:
        """Wrap the description into at most ``limit`` lines."""
        return textwrap.wrap(self.entry.description, width=width)[:limit]

    def enum_items(self, max_length: int = 50) -> List[Tuple[str, str]]:
        """Return ``(value, description)`` pairs, truncating long descriptions."""
        items: List[Tuple[str, str]] = []
        for value in self.entry.enum:
            description = self.entry.enum_descriptions.get(value) or _MISSING_ENUM_DESCRIPTION
            if len(description) > max_length:
                description = description[: max_length - 3] + "..."
            items.append((value, description))
        return items


def describe(
    resolved: ResolvedProperty,
    catalog: Optional[DocumentationCatalog] = None,
    kind: Optional[str] = None,
) -> PropertyDetails:
    """Attach catalog documentation to ``resolved``."""
    if catalog is None:
        catalog = default_catalog()
    return PropertyDetails(
        key=resolved.key,
        value=resolved.value,
        entry=catalog.lookup(resolved.key, kind),
    )


__all__ = ["PropertyDetails", "describe"]

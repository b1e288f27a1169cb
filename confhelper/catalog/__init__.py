"""Documentation catalog for workspace configuration properties."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..models import DocumentationEntry
from . import extensions, keybindings, launch, settings, tasks, workspace

NO_DOCUMENTATION = DocumentationEntry(
    description="No documentation available for this configuration.",
    value_type="unknown",
)

# Section order decides which entry wins when a bare name is defined twice.
_BUILTIN_SECTIONS: Dict[str, Mapping[str, Mapping[str, Any]]] = {
    "settings": settings.ENTRIES,
    "launch": launch.ENTRIES,
    "extensions": extensions.ENTRIES,
    "tasks": tasks.ENTRIES,
    "keybindings": keybindings.ENTRIES,
    "workspace": workspace.ENTRIES,
}


def _to_entry(raw: Mapping[str, Any]) -> DocumentationEntry:
    enum = raw.get("enum") or ()
    enum_descriptions = raw.get("enum_descriptions") or {}
    default = raw.get("default")
    return DocumentationEntry(
        description=str(raw["description"]),
        value_type=str(raw["type"]),
        default=None if default is None else str(default),
        enum=tuple(str(value) for value in enum),
        enum_descriptions=MappingProxyType(dict(enum_descriptions)),
    )


class DocumentationCatalog:
    """Property documentation keyed by configuration-file kind, then name."""

    def __init__(
        self, sections: Mapping[str, Mapping[str, Mapping[str, Any]]] | None = None
    ) -> None:
        raw_sections = _BUILTIN_SECTIONS if sections is None else sections
        self._sections: Dict[str, Dict[str, DocumentationEntry]] = {}
        self._flat: Dict[str, DocumentationEntry] = {}
        for kind, entries in raw_sections.items():
            converted = {name: _to_entry(raw) for name, raw in entries.items()}
            self._sections[kind] = converted
            self._flat.update(converted)

    def lookup(self, name: str, kind: Optional[str] = None) -> DocumentationEntry:
        """Return documentation for ``name``, or the sentinel entry.

        When ``kind`` is given its section is consulted before the flat
        namespace shared by every file kind.
        """
        if kind is not None:
            entry = self._sections.get(kind, {}).get(name)
            if entry is not None:
                return entry
        return self._flat.get(name, NO_DOCUMENTATION)

    def kinds(self) -> List[str]:
        return list(self._sections)

    def names(self, kind: Optional[str] = None) -> List[str]:
        if kind is None:
            return list(self._flat)
        return list(self._sections.get(kind, {}))

    def __contains__(self, name: object) -> bool:
        return name in self._flat

    def __len__(self) -> int:
        return len(self._flat)

    def __iter__(self) -> Iterator[str]:
        return iter(self._flat)


_DEFAULT_CATALOG: DocumentationCatalog | None = None


def default_catalog() -> DocumentationCatalog:
    """Return the shared catalog built from the bundled entries."""
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = DocumentationCatalog()
    return _DEFAULT_CATALOG


def lookup(name: str, kind: Optional[str] = None) -> DocumentationEntry:
    """Look up ``name`` in the bundled catalog."""
    return default_catalog().lookup(name, kind)


__all__ = [
    "DocumentationCatalog",
    "NO_DOCUMENTATION",
    "default_catalog",
    "lookup",
]

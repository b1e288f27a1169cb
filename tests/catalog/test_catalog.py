"""Tests for the documentation catalog."""

from __future__ import annotations

import pytest

from confhelper.catalog import (
    NO_DOCUMENTATION,
    DocumentationCatalog,
    default_catalog,
    extensions,
    keybindings,
    launch,
    lookup,
    settings,
    tasks,
    workspace,
)

_SECTIONS = {
    "settings": settings.ENTRIES,
    "launch": launch.ENTRIES,
    "extensions": extensions.ENTRIES,
    "tasks": tasks.ENTRIES,
    "keybindings": keybindings.ENTRIES,
    "workspace": workspace.ENTRIES,
}


@pytest.mark.parametrize("kind", sorted(_SECTIONS))
def test_every_known_name_returns_its_stored_entry(kind: str) -> None:
    for name, raw in _SECTIONS[kind].items():
        entry = lookup(name)
        assert entry.description == raw["description"]
        assert entry.value_type == raw["type"]
        assert entry.enum == tuple(raw.get("enum", ()))
        assert dict(entry.enum_descriptions) == raw.get("enum_descriptions", {})
        assert lookup(name, kind=kind) is entry


def test_known_entry_fields() -> None:
    entry = lookup("editor.tabSize")

    assert entry.value_type == "number"
    assert entry.default == "4"
    assert entry.enum == ()
    assert entry.description.startswith("The number of spaces a tab is equal to.")


def test_enumerated_entry() -> None:
    entry = lookup("files.autoSave")

    assert entry.enum == ("off", "afterDelay", "onFocusChange", "onWindowChange")
    assert entry.enum_descriptions["off"] == "An editor with changes is never automatically saved"


def test_null_default_is_kept_as_none() -> None:
    assert lookup("keybinding.args").default is None


@pytest.mark.parametrize("name", ["does.not.exist", "EDITOR.TABSIZE", "tabSize", ""])
def test_unknown_names_return_sentinel(name: str) -> None:
    entry = lookup(name)

    assert entry is NO_DOCUMENTATION
    assert entry.value_type == "unknown"
    assert entry.description == "No documentation available for this configuration."


def test_catalog_exposes_all_sections() -> None:
    catalog = default_catalog()

    assert catalog.kinds() == ["settings", "launch", "extensions", "tasks", "keybindings", "workspace"]
    assert len(catalog) == sum(len(entries) for entries in _SECTIONS.values())
    assert "request" in catalog
    assert "request" in catalog.names("launch")
    assert "request" not in catalog.names("settings")
    assert catalog.names("unknown-kind") == []


def test_flat_namespace_last_definition_wins() -> None:
    catalog = DocumentationCatalog(
        {
            "settings": {"type": {"description": "settings type", "type": "string"}},
            "launch": {"type": {"description": "debugger type", "type": "string"}},
        }
    )

    assert catalog.lookup("type").description == "debugger type"


def test_kind_lookup_avoids_collisions_and_falls_back() -> None:
    catalog = DocumentationCatalog(
        {
            "settings": {"type": {"description": "settings type", "type": "string"}},
            "launch": {
                "type": {"description": "debugger type", "type": "string"},
                "port": {"description": "debug port", "type": "number", "default": 9229},
            },
        }
    )

    assert catalog.lookup("type", kind="settings").description == "settings type"
    assert catalog.lookup("port", kind="settings").description == "debug port"
    assert catalog.lookup("port").default == "9229"
    assert catalog.lookup("missing", kind="launch") is NO_DOCUMENTATION

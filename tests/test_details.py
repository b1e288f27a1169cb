"""Tests for confhelper.details."""

from __future__ import annotations

from confhelper.catalog import DocumentationCatalog
from confhelper.details import describe
from confhelper.models import ResolvedProperty


def test_describe_enumerated_property() -> None:
    details = describe(ResolvedProperty(key="files.autoSave", value='"off"'))

    assert details.key == "files.autoSave"
    assert details.value == '"off"'
    assert details.type_info == "string (off | afterDelay | onFocusChange | onWindowChange)"

    items = dict(details.enum_items())
    assert items["off"] == "An editor with changes is never automatically s..."
    assert items["onFocusChange"] == "An editor with changes is automatically saved w..."
    assert all(len(description) <= 50 for description in items.values())


def test_describe_unknown_property_uses_sentinel() -> None:
    details = describe(ResolvedProperty(key="custom.flag", value="true"))

    assert details.type_info == "unknown"
    assert details.enum_items() == []
    assert details.description_lines() == ["No documentation available for this configuration."]


def test_description_lines_are_wrapped_and_limited() -> None:
    details = describe(ResolvedProperty(key="editor.autoIndent", value='"full"'))

    lines = details.description_lines()

    assert 0 < len(lines) <= 3
    assert all(len(line) <= 50 for line in lines)
    assert details.description_lines(width=20, limit=2) == ["Controls whether the", "editor should"]


def test_missing_enum_description_gets_placeholder() -> None:
    catalog = DocumentationCatalog(
        {
            "launch": {
                "mode": {
                    "description": "Mode.",
                    "type": "string",
                    "enum": ["a", "b"],
                    "enum_descriptions": {"a": "First"},
                }
            }
        }
    )

    details = describe(ResolvedProperty(key="mode", value='"b"'), catalog=catalog, kind="launch")

    assert details.enum_items() == [("a", "First"), ("b", "No description available")]

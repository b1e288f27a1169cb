"""Tests for the tolerant JSONC reader."""

from __future__ import annotations

import json

import pytest

from confhelper import jsonc


def test_strip_comments_keeps_comment_markers_inside_strings() -> None:
    text = '{"url": "http://example.com", "glob": "src/**/*.js"} // trailing'

    assert jsonc.strip_comments(text) == '{"url": "http://example.com", "glob": "src/**/*.js"} '


def test_strip_comments_preserves_line_count() -> None:
    text = '{\n  /* first\n     second */\n  "a": 1\n}'

    stripped = jsonc.strip_comments(text)

    assert stripped.count("\n") == text.count("\n")
    assert stripped.splitlines()[3] == '  "a": 1'


def test_strip_comments_handles_escaped_quotes() -> None:
    text = '{"a": "say \\"hi\\" // not a comment"}'

    assert jsonc.strip_comments(text) == text


def test_unterminated_block_comment_swallows_rest() -> None:
    assert jsonc.strip_comments('{"a": 1} /* open\n') == '{"a": 1} \n'


def test_strip_trailing_commas() -> None:
    text = '{"a": [1, 2,], "b": ",}",\n}'

    assert jsonc.strip_trailing_commas(text) == '{"a": [1, 2], "b": ",}"\n}'


def test_loads_accepts_comments_and_trailing_commas() -> None:
    text = """
    {
        // launch configurations
        "version": "0.2.0",
        "configurations": [
            {"type": "node", /* inline */ "request": "launch",},
        ],
    }
    """

    assert jsonc.loads(text) == {
        "version": "0.2.0",
        "configurations": [{"type": "node", "request": "launch"}],
    }


def test_loads_raises_on_malformed_input() -> None:
    with pytest.raises(json.JSONDecodeError):
        jsonc.loads('{"a": ')

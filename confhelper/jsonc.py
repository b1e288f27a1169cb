"""Tolerant reader for JSON with comments and trailing commas."""

from __future__ import annotations

import json
from typing import Any, List


def strip_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments that sit outside string literals.

    Newlines inside block comments are preserved so line numbers of the
    remaining text do not shift.
    """
    out: List[str] = []
    in_string = False
    escaped = False
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < length else ""
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"' or ch == "\n":
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue

        if ch == "/" and nxt == "/":
            while i < length and text[i] != "\n":
                i += 1
            continue

        if ch == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            stop = length if end == -1 else end + 2
            out.append("\n" * text.count("\n", i, stop))
            i = stop
            continue

        out.append(ch)
        i += 1

    return "".join(out)


def strip_trailing_commas(text: str) -> str:
    """Drop commas that are directly followed by a closing bracket."""
    out: List[str] = []
    in_string = False
    escaped = False
    length = len(text)
    for index, ch in enumerate(text):
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == ",":
            ahead = index + 1
            while ahead < length and text[ahead].isspace():
                ahead += 1
            if ahead < length and text[ahead] in "}]":
                continue
        out.append(ch)
    return "".join(out)


def loads(text: str, **kwargs: Any) -> Any:
    """Parse JSONC text; raises ``json.JSONDecodeError`` when malformed.

    Keyword arguments are forwarded to :func:`json.loads`.
    """
    return json.loads(strip_trailing_commas(strip_comments(text)), **kwargs)


__all__ = ["loads", "strip_comments", "strip_trailing_commas"]

"""Locate the configuration property under the cursor in JSON-like text."""

from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, Optional, Sequence, Tuple

from . import jsonc
from .logging import get_logger
from .models import ResolvedProperty

UNKNOWN_VALUE = "unknown"

DEFAULT_COLLECTION_KEYS: Tuple[str, ...] = ("configurations", "tasks")

_QUOTED_KEY_VALUE = re.compile(r'"([^"]+)"\s*:\s*(.+?)(?:,\s*$|$)')
_BARE_KEY_VALUE = re.compile(r"(?:^|[{,])\s*([A-Za-z_$][\w$.\-]*)\s*:\s*(.+?)(?:,\s*$|$)")
_QUOTED_KEY = re.compile(r'"([^"]+)"')

# Integral floats below this magnitude are written without a fraction.
_INTEGRAL_FLOAT_LIMIT = 1e21


class PropertyResolver:
    """Resolves the key/value pair a cursor line refers to.

    Line-local pattern matching is the primary strategy because documents are
    frequently mid-edit. When the whole document parses, the parsed structure
    supplies a better value for the key found on the line.
    """

    def __init__(self, collection_keys: Sequence[str] = DEFAULT_COLLECTION_KEYS) -> None:
        self.collection_keys = tuple(collection_keys)
        self.logger = get_logger("resolver")

    def resolve_at(self, text: str, line_index: int) -> Optional[ResolvedProperty]:
        line_match = self._match_line(_line_at(text, line_index))
        document = self._parse_document(text)

        if line_match is not None:
            key, line_value = line_match
            if document is not None:
                try:
                    structural = self._structural_value(document, key)
                except RecursionError:
                    self.logger.debug("Value of %s too deeply nested to serialize", key)
                    structural = None
                if structural is not None:
                    return ResolvedProperty(key=key, value=structural)
            return ResolvedProperty(key=key, value=line_value)

        if document:
            first_key = next(iter(document))
            try:
                return ResolvedProperty(key=first_key, value=format_value(document[first_key]))
            except RecursionError:
                self.logger.debug("Value of %s too deeply nested to serialize", first_key)
        return None

    def _match_line(self, line: str) -> Optional[Tuple[str, str]]:
        match = _QUOTED_KEY_VALUE.search(line) or _BARE_KEY_VALUE.search(line)
        if match:
            return match.group(1), _clean_value(match.group(2))

        match = _QUOTED_KEY.search(line)
        if match:
            return match.group(1), UNKNOWN_VALUE
        return None

    def _parse_document(self, text: str) -> Optional[Dict[str, Any]]:
        try:
            parsed = jsonc.loads(
                text, parse_float=_parse_float, parse_constant=_reject_constant
            )
        except (ValueError, RecursionError) as exc:
            self.logger.debug("Document not parseable, using line-local result: %s", exc)
            return None
        if not isinstance(parsed, dict):
            return None
        return parsed

    def _structural_value(self, document: Dict[str, Any], key: str) -> Optional[str]:
        if key in document:
            return format_value(document[key])

        for collection_key in self.collection_keys:
            collection = document.get(collection_key)
            if not isinstance(collection, list):
                continue
            for item in collection:
                if isinstance(item, dict) and key in item:
                    self.logger.debug("Resolved %s inside %s", key, collection_key)
                    return format_value(item[key])
        return None


def format_value(value: Any) -> str:
    """Serialize a parsed value the way it would appear in the document."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _parse_float(literal: str) -> float | int | None:
    number = float(literal)
    if math.isinf(number):
        return None
    if number.is_integer() and abs(number) < _INTEGRAL_FLOAT_LIMIT:
        return int(number)
    return number


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _line_at(text: str, line_index: int) -> str:
    lines = text.split("\n")
    if 0 <= line_index < len(lines):
        return lines[line_index].rstrip("\r")
    return ""


def _clean_value(fragment: str) -> str:
    value = jsonc.strip_comments(fragment).strip()
    if value.endswith(","):
        value = value[:-1].rstrip()
    return value or UNKNOWN_VALUE


_DEFAULT_RESOLVER: PropertyResolver | None = None


def resolve_at(text: str, line_index: int) -> Optional[ResolvedProperty]:
    """Resolve the property on ``line_index`` (zero-based) of ``text``."""
    global _DEFAULT_RESOLVER
    if _DEFAULT_RESOLVER is None:
        _DEFAULT_RESOLVER = PropertyResolver()
    return _DEFAULT_RESOLVER.resolve_at(text, line_index)


__all__ = [
    "DEFAULT_COLLECTION_KEYS",
    "PropertyResolver",
    "UNKNOWN_VALUE",
    "format_value",
    "resolve_at",
]

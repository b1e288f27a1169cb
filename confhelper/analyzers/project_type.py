"""Heuristic project type detection from marker files and name patterns."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..logging import get_logger
from ..models import ProjectSignature, SignatureDefinition
from .signatures import KNOWN_SIGNATURES

DETECTION_THRESHOLD = 30.0

_WILDCARDS = ("*", "?", "[")
_DIRECTORY_SEPARATORS = ("/", os.sep)


def compute_confidence(matched: int, total: int) -> float:
    """Return the matched share of ``total`` checks as a percentage."""
    if total <= 0:
        return 0.0
    return 100 * matched / total


def is_detected(confidence: float) -> bool:
    """A signature counts as detected strictly above the threshold."""
    return confidence > DETECTION_THRESHOLD


class ProjectTypeAnalyzer:
    """Scores a directory against a fixed, ordered set of signatures."""

    def __init__(self, signatures: Sequence[SignatureDefinition] = KNOWN_SIGNATURES) -> None:
        self.signatures = tuple(signatures)
        self.logger = get_logger("analyzers.project_type")

    def analyze(self, directory: str | os.PathLike[str]) -> List[ProjectSignature]:
        root = Path(directory)
        entries = self._list_entries(root)
        return [self._score(root, entries, definition) for definition in self.signatures]

    def _score(
        self, root: Path, entries: List[str], definition: SignatureDefinition
    ) -> ProjectSignature:
        matched_files = sum(1 for name in definition.marker_files if _exists(root / name))
        matched_patterns = sum(
            1 for pattern in definition.patterns if _pattern_matches(pattern, entries)
        )
        total = len(definition.marker_files) + len(definition.patterns)
        confidence = compute_confidence(matched_files + matched_patterns, total)
        self.logger.debug(
            "%s: %d/%d files, %d/%d patterns (%.1f%%)",
            definition.name,
            matched_files,
            len(definition.marker_files),
            matched_patterns,
            len(definition.patterns),
            confidence,
        )
        return ProjectSignature(
            name=definition.name,
            marker_files=list(definition.marker_files),
            patterns=list(definition.patterns),
            confidence=confidence,
            detected=is_detected(confidence),
        )

    def _list_entries(self, root: Path) -> List[str]:
        try:
            return [entry.name for entry in root.iterdir()]
        except OSError as exc:
            self.logger.debug("Unable to list %s: %s", root, exc)
            return []


def select_primary(signatures: Iterable[ProjectSignature]) -> Optional[ProjectSignature]:
    """Return the most confident detected signature; earlier ones win ties."""
    detected = [signature for signature in signatures if signature.detected]
    if not detected:
        return None
    return max(detected, key=lambda signature: signature.confidence)


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def _pattern_matches(pattern: str, entries: List[str]) -> bool:
    if pattern.endswith(_DIRECTORY_SEPARATORS):
        name = pattern.rstrip("/" + os.sep)
        return name in entries
    if any(token in pattern for token in _WILDCARDS):
        return any(fnmatchcase(entry, pattern) for entry in entries)
    return False


__all__ = [
    "DETECTION_THRESHOLD",
    "ProjectTypeAnalyzer",
    "compute_confidence",
    "is_detected",
    "select_primary",
]

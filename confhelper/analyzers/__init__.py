"""Project type analysis and signature registry."""

from __future__ import annotations

from typing import List, Sequence, Set

from ..models import SignatureDefinition
from .project_type import (
    DETECTION_THRESHOLD,
    ProjectTypeAnalyzer,
    compute_confidence,
    is_detected,
    select_primary,
)
from .signatures import KNOWN_SIGNATURES


def build_signatures(extra: Sequence[SignatureDefinition] = ()) -> List[SignatureDefinition]:
    """Return the built-in signatures followed by ``extra`` ones, in order."""
    signatures: List[SignatureDefinition] = list(KNOWN_SIGNATURES)
    seen: Set[str] = {definition.name.lower() for definition in signatures}
    for definition in extra:
        key = definition.name.lower()
        if key in seen:
            raise ValueError(f"Signature '{definition.name}' is already defined")
        if not definition.marker_files and not definition.patterns:
            raise ValueError(f"Signature '{definition.name}' declares no checks")
        signatures.append(definition)
        seen.add(key)
    return signatures


__all__ = [
    "DETECTION_THRESHOLD",
    "KNOWN_SIGNATURES",
    "ProjectTypeAnalyzer",
    "build_signatures",
    "compute_confidence",
    "is_detected",
    "select_primary",
]

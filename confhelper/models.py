"""Core data models shared across confhelper components."""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class DocumentationEntry:
    """Static documentation for a single configuration property."""

    description: str
    value_type: str
    default: Optional[str] = None
    enum: Tuple[str, ...] = ()
    enum_descriptions: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedProperty:
    """Key/value pair located under the cursor."""

    key: str
    value: str


@dataclass(frozen=True)
class SignatureDefinition:
    """Marker files and name patterns that identify one project type."""

    name: str
    marker_files: Tuple[str, ...] = ()
    patterns: Tuple[str, ...] = ()


@dataclass
class ProjectSignature:
    """Scored result of checking a directory against a signature definition."""

    name: str
    marker_files: List[str]
    patterns: List[str]
    confidence: float = 0.0
    detected: bool = False

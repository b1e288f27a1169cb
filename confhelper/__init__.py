"""Property documentation and project type detection for editor configuration files."""

from .analyzers import ProjectTypeAnalyzer, select_primary
from .catalog import DocumentationCatalog, lookup
from .models import DocumentationEntry, ProjectSignature, ResolvedProperty, SignatureDefinition
from .resolver import PropertyResolver, resolve_at

__all__ = [
    "DocumentationCatalog",
    "DocumentationEntry",
    "ProjectSignature",
    "ProjectTypeAnalyzer",
    "PropertyResolver",
    "ResolvedProperty",
    "SignatureDefinition",
    "lookup",
    "resolve_at",
    "select_primary",
]

"""Configuration loading for confhelper (.confhelper.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .config_files import CONFIG_DIRECTORY, CONFIG_FILE_NAMES
from .models import SignatureDefinition
from .resolver import DEFAULT_COLLECTION_KEYS

CONFIG_FILENAME = ".confhelper.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ResolverConfig:
    """Which array properties hold per-item configuration objects."""

    collection_keys: List[str] = field(default_factory=lambda: list(DEFAULT_COLLECTION_KEYS))


@dataclass
class ConfigFilesConfig:
    """Where the editor keeps its configuration files."""

    directory: str = CONFIG_DIRECTORY
    names: List[str] = field(default_factory=lambda: list(CONFIG_FILE_NAMES))


@dataclass
class AnalysisConfig:
    """Extra project signatures appended after the built-in ones."""

    signatures: List[SignatureDefinition] = field(default_factory=list)


@dataclass
class ConfHelperConfig:
    """Represents the settings defined in .confhelper.yml."""

    root: Path
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    config_files: ConfigFilesConfig = field(default_factory=ConfigFilesConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)


def load_config(config_path: Path) -> ConfHelperConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ConfHelperConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    resolver = ResolverConfig()
    resolver_data = _as_dict(data.get("resolver"))
    if "collection_keys" in resolver_data:
        resolver.collection_keys = _as_str_list(resolver_data.get("collection_keys"))

    config_files = ConfigFilesConfig()
    files_data = _as_dict(data.get("config_files"))
    if files_data:
        directory = _as_str(files_data.get("directory"))
        if directory:
            config_files.directory = directory
        names = _as_str_list(files_data.get("names"))
        if names:
            config_files.names = names

    analysis = AnalysisConfig()
    analysis_data = _as_dict(data.get("analysis"))
    if analysis_data:
        analysis.signatures = _parse_signatures(analysis_data.get("signatures"))

    return ConfHelperConfig(
        root=root,
        resolver=resolver,
        config_files=config_files,
        analysis=analysis,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_signatures(value: Any) -> List[SignatureDefinition]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("analysis.signatures must be a list")

    signatures: List[SignatureDefinition] = []
    for index, item in enumerate(value):
        data = _as_dict(item)
        name = _as_str(data.get("name"))
        if not name:
            raise ConfigError(f"analysis.signatures[{index}] is missing a name")
        files = _as_str_list(data.get("files"))
        patterns = _as_str_list(data.get("patterns"))
        if not files and not patterns:
            raise ConfigError(f"Signature '{name}' must declare files or patterns")
        signatures.append(
            SignatureDefinition(name=name, marker_files=tuple(files), patterns=tuple(patterns))
        )
    return signatures


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []

"""Well-known editor configuration files and their documentation kinds."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import List, Optional, Sequence, Tuple

CONFIG_DIRECTORY = ".vscode"

CONFIG_FILE_NAMES: Tuple[str, ...] = (
    "settings.json",
    "launch.json",
    "tasks.json",
    "extensions.json",
)

_KIND_BY_NAME = {
    "settings.json": "settings",
    "launch.json": "launch",
    "tasks.json": "tasks",
    "extensions.json": "extensions",
    "keybindings.json": "keybindings",
}

_WORKSPACE_SUFFIX = ".code-workspace"

_DESCRIPTIONS = {
    "settings.json": "Workspace settings",
    "launch.json": "Debug configurations",
    "tasks.json": "Task definitions",
    "extensions.json": "Recommended extensions",
}


@dataclass
class ConfigFileStatus:
    """Presence of one well-known configuration file in a workspace."""

    label: str
    description: str
    path: Path
    exists: bool


def is_config_file(
    path: str | os.PathLike[str],
    names: Sequence[str] = CONFIG_FILE_NAMES,
    directory: str = CONFIG_DIRECTORY,
) -> bool:
    """True when ``path`` is a known file name residing in the config directory."""
    pure = PurePath(path)
    return pure.name in names and pure.parent.name == directory


def kind_for(path: str | os.PathLike[str]) -> Optional[str]:
    """Return the documentation kind for a configuration file path."""
    name = PurePath(path).name
    if name.endswith(_WORKSPACE_SUFFIX):
        return "workspace"
    return _KIND_BY_NAME.get(name)


def list_config_files(
    workspace: str | os.PathLike[str],
    names: Sequence[str] = CONFIG_FILE_NAMES,
    directory: str = CONFIG_DIRECTORY,
) -> List[ConfigFileStatus]:
    """Report which configuration files exist; existing ones sort first."""
    config_dir = Path(workspace) / directory
    statuses = [
        ConfigFileStatus(
            label=name,
            description=_DESCRIPTIONS.get(name, "Configuration file"),
            path=config_dir / name,
            exists=(config_dir / name).is_file(),
        )
        for name in names
    ]
    statuses.sort(key=lambda status: (not status.exists, status.label))
    return statuses


__all__ = [
    "CONFIG_DIRECTORY",
    "CONFIG_FILE_NAMES",
    "ConfigFileStatus",
    "is_config_file",
    "kind_for",
    "list_config_files",
]

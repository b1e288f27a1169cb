"""Helper utilities for constructing temporary workspaces in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Iterable, Mapping


class WorkspaceBuilder:
    """Utility for writing files and folders into a throwaway workspace."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "workspace"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the workspace."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def mkdirs(self, names: Iterable[str]) -> None:
        """Create empty directories relative to the workspace root."""
        for name in names:
            (self.root / name).mkdir(parents=True, exist_ok=True)

    def path(self) -> Path:
        """Return the workspace root path."""
        return self.root


__all__ = ["WorkspaceBuilder"]

"""Built-in project type signatures, in detection order."""

from __future__ import annotations

from typing import Tuple

from ..models import SignatureDefinition

KNOWN_SIGNATURES: Tuple[SignatureDefinition, ...] = (
    SignatureDefinition(
        name="Node.js",
        marker_files=("package.json",),
        patterns=("node_modules/", "*.js", "*.ts"),
    ),
    SignatureDefinition(
        name="React",
        marker_files=("package.json",),
        patterns=("src/", "public/", "*.jsx", "*.tsx"),
    ),
    SignatureDefinition(
        name="Python",
        marker_files=("requirements.txt", "setup.py", "pyproject.toml"),
        patterns=("*.py", "__pycache__/"),
    ),
    SignatureDefinition(
        name="Go",
        marker_files=("go.mod", "go.sum"),
        patterns=("*.go", "cmd/"),
    ),
    SignatureDefinition(
        name="Rust",
        marker_files=("Cargo.toml", "Cargo.lock"),
        patterns=("*.rs", "target/"),
    ),
    SignatureDefinition(
        name="Java",
        marker_files=("pom.xml", "build.gradle", "build.gradle.kts"),
        patterns=("*.java", ".mvn/", "gradle/"),
    ),
)

__all__ = ["KNOWN_SIGNATURES"]

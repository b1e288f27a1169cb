"""Tests for the project type analyzer."""

from __future__ import annotations

from pathlib import Path

import pytest

from confhelper.analyzers import (
    KNOWN_SIGNATURES,
    ProjectTypeAnalyzer,
    build_signatures,
    compute_confidence,
    is_detected,
    select_primary,
)
from confhelper.models import ProjectSignature, SignatureDefinition
from tests._fixtures.workspace_builder import WorkspaceBuilder

FRONTEND = SignatureDefinition(name="Frontend", marker_files=("package.json",), patterns=("src/",))
PYTHON = SignatureDefinition(name="Python", marker_files=("requirements.txt",), patterns=("*.py",))


def _by_name(signatures: list[ProjectSignature]) -> dict[str, ProjectSignature]:
    return {signature.name: signature for signature in signatures}


def test_marker_file_and_directory_pattern_score_full_confidence(
    workspace: WorkspaceBuilder,
) -> None:
    workspace.write({"package.json": "{}\n"})
    workspace.mkdirs(["src"])

    results = _by_name(ProjectTypeAnalyzer([FRONTEND, PYTHON]).analyze(workspace.path()))

    assert results["Frontend"].confidence == 100
    assert results["Frontend"].detected is True
    assert results["Python"].confidence == 0
    assert results["Python"].detected is False


def test_results_follow_declaration_order(workspace: WorkspaceBuilder) -> None:
    workspace.write({"main.py": "print('hi')\n", "requirements.txt": "pyyaml\n"})

    results = ProjectTypeAnalyzer([FRONTEND, PYTHON]).analyze(workspace.path())

    assert [signature.name for signature in results] == ["Frontend", "Python"]
    assert results[1].marker_files == ["requirements.txt"]
    assert results[1].patterns == ["*.py"]


def test_exactly_thirty_percent_is_not_detected(workspace: WorkspaceBuilder) -> None:
    markers = tuple(f"marker{index}.txt" for index in range(10))
    workspace.write({name: "" for name in markers[:3]})
    definition = SignatureDefinition(name="Thirty", marker_files=markers)

    (result,) = ProjectTypeAnalyzer([definition]).analyze(workspace.path())

    assert result.confidence == 30
    assert result.detected is False


def test_detection_threshold_boundary() -> None:
    assert compute_confidence(3, 10) == 30.0
    assert is_detected(30.0) is False
    assert is_detected(30.0001) is True
    assert compute_confidence(0, 0) == 0.0


def test_signature_without_checks_scores_zero(workspace: WorkspaceBuilder) -> None:
    (result,) = ProjectTypeAnalyzer([SignatureDefinition(name="Empty")]).analyze(workspace.path())

    assert result.confidence == 0
    assert result.detected is False


def test_pattern_counts_once_regardless_of_matching_entries(
    workspace: WorkspaceBuilder,
) -> None:
    workspace.write({"a.py": "", "b.py": "", "c.py": ""})
    definition = SignatureDefinition(name="Scripts", patterns=("*.py", "*.sh"))

    (result,) = ProjectTypeAnalyzer([definition]).analyze(workspace.path())

    assert result.confidence == 50


def test_patterns_are_matched_against_whole_names(workspace: WorkspaceBuilder) -> None:
    workspace.write({"happy.txt": "", "nested/deep.py": ""})
    definition = SignatureDefinition(name="Python", patterns=("*.py",))

    (result,) = ProjectTypeAnalyzer([definition]).analyze(workspace.path())

    assert result.confidence == 0


def test_literal_pattern_without_wildcard_never_matches(workspace: WorkspaceBuilder) -> None:
    workspace.write({"Makefile": "all:\n"})
    definition = SignatureDefinition(name="Make", patterns=("Makefile",))

    (result,) = ProjectTypeAnalyzer([definition]).analyze(workspace.path())

    assert result.confidence == 0


def test_nonexistent_directory_scores_zero_without_raising(tmp_path: Path) -> None:
    results = ProjectTypeAnalyzer().analyze(tmp_path / "missing")

    assert [signature.name for signature in results] == [s.name for s in KNOWN_SIGNATURES]
    assert all(signature.confidence == 0 for signature in results)
    assert not any(signature.detected for signature in results)


def test_file_path_is_treated_as_empty_listing(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("hello\n", encoding="utf-8")

    results = ProjectTypeAnalyzer([PYTHON]).analyze(target)

    assert results[0].confidence == 0


def test_builtin_signatures_detect_node_project(workspace: WorkspaceBuilder) -> None:
    workspace.write({"package.json": "{}\n", "index.js": "console.log('hi');\n"})
    workspace.mkdirs(["node_modules"])

    results = _by_name(ProjectTypeAnalyzer().analyze(workspace.path()))

    assert results["Node.js"].confidence == 75
    assert results["Node.js"].detected is True
    assert results["React"].confidence == 20
    assert results["React"].detected is False
    assert results["Python"].confidence == 0
    assert select_primary(results.values()).name == "Node.js"


def test_builtin_signatures_detect_python_project(workspace: WorkspaceBuilder) -> None:
    workspace.write({"pyproject.toml": "[project]\n", "app.py": "", "setup.py": ""})

    results = _by_name(ProjectTypeAnalyzer().analyze(workspace.path()))

    assert results["Python"].confidence == 60
    assert results["Python"].detected is True


def _signature(name: str, confidence: float) -> ProjectSignature:
    return ProjectSignature(
        name=name,
        marker_files=[],
        patterns=[],
        confidence=confidence,
        detected=is_detected(confidence),
    )


def test_select_primary_prefers_highest_confidence() -> None:
    primary = select_primary([_signature("A", 40), _signature("B", 80), _signature("C", 60)])

    assert primary is not None
    assert primary.name == "B"


def test_select_primary_breaks_ties_by_declaration_order() -> None:
    primary = select_primary([_signature("First", 50), _signature("Second", 50)])

    assert primary is not None
    assert primary.name == "First"


def test_select_primary_ignores_undetected_signatures() -> None:
    assert select_primary([_signature("Low", 30), _signature("Zero", 0)]) is None
    assert select_primary([]) is None


def test_build_signatures_appends_extras_in_order() -> None:
    deno = SignatureDefinition(name="Deno", marker_files=("deno.json",), patterns=("*.ts",))

    signatures = build_signatures([deno])

    assert signatures[: len(KNOWN_SIGNATURES)] == list(KNOWN_SIGNATURES)
    assert signatures[-1] is deno


@pytest.mark.parametrize(
    "definition",
    [
        SignatureDefinition(name="python", marker_files=("setup.cfg",)),
        SignatureDefinition(name="Nothing"),
    ],
)
def test_build_signatures_rejects_invalid_extras(definition: SignatureDefinition) -> None:
    with pytest.raises(ValueError):
        build_signatures([definition])

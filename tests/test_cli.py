"""CLI behaviour tests."""

from __future__ import annotations

import json
import logging

import pytest

from confhelper.cli import _build_parser, main
from tests._fixtures.workspace_builder import WorkspaceBuilder


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "analyze"])
    assert args.verbose is True
    assert args.command == "analyze"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["recommend", "--verbose"])
    assert args.verbose is True
    assert args.command == "recommend"


def test_cli_resolve_requires_line() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["resolve", "settings.json"])


def test_resolve_prints_documentation(workspace: WorkspaceBuilder, capsys) -> None:
    workspace.write(
        {
            ".vscode/settings.json": """
            {
                "editor.tabSize": 4,
                "files.autoSave": "afterDelay"
            }
            """
        }
    )
    target = workspace.path() / ".vscode" / "settings.json"

    main(["resolve", str(target), "--line", "3", "--workspace", str(workspace.path())])

    out = capsys.readouterr().out
    assert "Property: files.autoSave" in out
    assert 'Value: "afterDelay"' in out
    assert "Type: string (off | afterDelay | onFocusChange | onWindowChange)" in out
    assert "Default: off" in out
    assert "Possible values:" in out
    assert "  - off: " in out


def test_resolve_reports_missing_property(workspace: WorkspaceBuilder, capsys) -> None:
    workspace.write({".vscode/launch.json": "{\n\n"})
    target = workspace.path() / ".vscode" / "launch.json"

    main(["resolve", str(target), "--line", "2", "--workspace", str(workspace.path())])

    assert "No property found at cursor position" in capsys.readouterr().out


def test_resolve_missing_file_exits(workspace: WorkspaceBuilder) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                "resolve",
                str(workspace.path() / "nope.json"),
                "--line",
                "1",
                "--workspace",
                str(workspace.path()),
            ]
        )
    assert excinfo.value.code == 1


def test_analyze_and_recommend(workspace: WorkspaceBuilder, capsys) -> None:
    workspace.write({"package.json": "{}\n", "index.js": "", "README.md": "# demo\n"})
    workspace.mkdirs(["node_modules"])

    main(["analyze", str(workspace.path())])
    out = capsys.readouterr().out
    assert "Node.js: 75.0% (detected)" in out
    assert "React: 20.0% (-)" in out

    main(["recommend", str(workspace.path())])
    assert "Detected Node.js project (75.0%)." in capsys.readouterr().out


def test_analyze_json_includes_configured_signatures(
    workspace: WorkspaceBuilder, capsys
) -> None:
    workspace.write(
        {
            ".confhelper.yml": """
            analysis:
              signatures:
                - name: Deno
                  files: [deno.json]
                  patterns: ["*.ts"]
            """,
            "deno.json": "{}\n",
            "main.ts": "",
        }
    )

    main(["analyze", str(workspace.path()), "--json"])

    payload = json.loads(capsys.readouterr().out)
    deno = payload[-1]
    assert deno["name"] == "Deno"
    assert deno["confidence"] == 100
    assert deno["detected"] is True


def test_recommend_without_detection(tmp_path, capsys) -> None:
    main(["recommend", str(tmp_path)])

    assert "No specific project type detected" in capsys.readouterr().out


def test_files_lists_config_status(workspace: WorkspaceBuilder, capsys) -> None:
    workspace.write({".vscode/settings.json": "{}\n"})

    main(["files", str(workspace.path())])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "settings.json: exists - Workspace settings"
    assert "launch.json: missing - Debug configurations" in lines


def test_invalid_config_exits(workspace: WorkspaceBuilder) -> None:
    workspace.write({".confhelper.yml": "- not a mapping\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", str(workspace.path())])
    assert excinfo.value.code == 1


def test_log_file_option_collects_debug_output(workspace: WorkspaceBuilder, capsys) -> None:
    workspace.write({"requirements.txt": "pyyaml\n", "main.py": ""})
    log_file = workspace.path() / "confhelper.log"

    main(["--log-file", str(log_file), "analyze", str(workspace.path())])

    assert "Python: " in capsys.readouterr().out
    logger = logging.getLogger("confhelper")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    assert "confhelper.cli: Loaded configuration rooted at" in log_file.read_text(encoding="utf-8")

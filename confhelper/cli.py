"""CLI entrypoints for confhelper commands."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List

from .analyzers import ProjectTypeAnalyzer, build_signatures, select_primary
from .config import ConfHelperConfig, ConfigError, load_config
from .config_files import is_config_file, kind_for, list_config_files
from .details import describe
from .logging import configure_logging, get_logger
from .models import ProjectSignature
from .resolver import PropertyResolver


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the workspace root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confhelper",
        description="Explain editor configuration properties and detect project types.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug-level logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Describe the configuration property on a given line.",
    )
    _add_verbose_option(resolve_parser, suppress_default=True)
    resolve_parser.add_argument("file", help="Configuration file to inspect.")
    resolve_parser.add_argument(
        "--line",
        type=int,
        required=True,
        help="Line number of the cursor (1-based).",
    )
    resolve_parser.add_argument(
        "--kind",
        default=None,
        help="Documentation kind (settings, launch, tasks, ...); inferred from the file name by default.",
    )
    resolve_parser.add_argument(
        "--workspace",
        default=".",
        help="Workspace root holding .confhelper.yml (defaults to current directory).",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Score the workspace against known project types.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_path_argument(analyze_parser)
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the analysis as JSON.",
    )

    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Report the primary detected project type.",
    )
    _add_verbose_option(recommend_parser, suppress_default=True)
    _add_path_argument(recommend_parser)

    files_parser = subparsers.add_parser(
        "files",
        help="List well-known configuration files and whether they exist.",
    )
    _add_verbose_option(files_parser, suppress_default=True)
    _add_path_argument(files_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for confhelper commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    workspace = Path(getattr(args, "workspace", None) or args.path)
    try:
        config = load_config(workspace)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    logger.debug("Loaded configuration rooted at %s", config.root)

    if args.command == "resolve":
        _run_resolve(parser, args, config)
    elif args.command == "analyze":
        signatures = _analyze(parser, config, workspace)
        if args.json:
            print(json.dumps([asdict(signature) for signature in signatures], indent=2))
        else:
            for signature in signatures:
                marker = "detected" if signature.detected else "-"
                print(f"{signature.name}: {signature.confidence:.1f}% ({marker})")
    elif args.command == "recommend":
        primary = select_primary(_analyze(parser, config, workspace))
        if primary is None:
            print(
                "No specific project type detected. "
                "You can manually select a configuration template."
            )
        else:
            print(f"Detected {primary.name} project ({primary.confidence:.1f}%).")
    elif args.command == "files":
        statuses = list_config_files(
            workspace,
            names=config.config_files.names,
            directory=config.config_files.directory,
        )
        for status in statuses:
            state = "exists" if status.exists else "missing"
            print(f"{status.label}: {state} - {status.description}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_resolve(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: ConfHelperConfig
) -> None:
    path = Path(args.file)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        parser.exit(1, f"Unable to read {path}: {exc}\n")

    files = config.config_files
    if not is_config_file(path, names=files.names, directory=files.directory):
        get_logger("cli").info("%s is not a managed configuration file", path)

    resolver = PropertyResolver(collection_keys=config.resolver.collection_keys)
    resolved = resolver.resolve_at(text, args.line - 1)
    if resolved is None:
        print("No property found at cursor position")
        return

    details = describe(resolved, kind=args.kind or kind_for(path))
    print(f"Property: {details.key}")
    print(f"Value: {details.value}")
    print(f"Type: {details.type_info}")
    if details.entry.default is not None:
        print(f"Default: {details.entry.default}")
    print("Description:")
    for line in details.description_lines():
        print(f"  {line}")
    items = details.enum_items()
    if items:
        print("Possible values:")
        for value, description in items:
            print(f"  - {value}: {description}")


def _analyze(
    parser: argparse.ArgumentParser, config: ConfHelperConfig, workspace: Path
) -> List[ProjectSignature]:
    try:
        signatures = build_signatures(config.analysis.signatures)
    except ValueError as exc:
        parser.exit(1, f"Invalid signature configuration: {exc}\n")
    analyzer = ProjectTypeAnalyzer(signatures)
    return analyzer.analyze(workspace)


if __name__ == "__main__":
    main(sys.argv[1:])

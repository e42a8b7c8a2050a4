"""CLI entrypoint for Skillshelf."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillshelf import __version__
from skillshelf.cli.handlers import (
    handle_guard_git,
    handle_index,
    handle_lint,
    handle_list,
    handle_select,
    handle_show,
    handle_validate_config,
)
from skillshelf.constants.branding import CLI_DESCRIPTION
from skillshelf.exceptions import ConfigError, SkillshelfError
from skillshelf.exceptions.validation import format_errors
from skillshelf.validation import preflight_validate

WORKSPACE_COMMANDS: frozenset[str] = frozenset({"list", "show", "select", "lint", "index"})


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillshelf",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-r", "--root", type=Path, default=Path("."), help="Workspace root path (default: cwd)")
    common.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging and extra detail")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", parents=[common], help="List skill documents")

    show = subparsers.add_parser("show", parents=[common], help="Print one skill document")
    show.add_argument("slug", help="Skill slug (folder name)")
    show.add_argument("--code-only", action="store_true", help="Print only fenced code blocks")

    select = subparsers.add_parser("select", parents=[common], help="Rank skill documents for a topic")
    select.add_argument("query", nargs="+", help="Topic words")
    select.add_argument("-n", "--limit", type=int, default=None, help="Maximum number of matches")

    lint = subparsers.add_parser("lint", parents=[common], help="Check skill documents for structural problems")
    lint.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON report to this file")
    lint.add_argument("--strict", action="store_true", help="Fail on warnings as well as errors")
    lint.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    lint.add_argument("--no-color", action="store_true", help="Disable colored output")

    index = subparsers.add_parser("index", parents=[common], help="Emit a JSON index of skill documents")
    index.add_argument("-o", "--output", type=Path, default=None, help="Write the index here instead of stdout")

    subparsers.add_parser("validate-config", parents=[common], help="Validate configuration without loading skills")

    subparsers.add_parser(
        "guard-git",
        help="Pre-tool-use hook: read a tool-use payload on stdin and block git write operations",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "guard-git":
        return handle_guard_git(sys.stdin, sys.stderr)

    if args.command == "validate-config":
        return handle_validate_config(args)

    if args.command not in WORKSPACE_COMMANDS:
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = preflight_validate(args.root, args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    handlers = {
        "list": handle_list,
        "show": handle_show,
        "select": handle_select,
        "lint": handle_lint,
        "index": handle_index,
    }
    try:
        return handlers[args.command](args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillshelfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

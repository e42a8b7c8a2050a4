"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from skillshelf.catalog import build_index, load_catalog
from skillshelf.config import load_config
from skillshelf.exceptions.validation import format_errors
from skillshelf.hooks import run_git_guard
from skillshelf.io import dump_json_text
from skillshelf.lint import lint_workspace
from skillshelf.model import LintReport
from skillshelf.reporting import (
    LintStdoutReporter,
    render_catalog_table,
    render_code_blocks,
    render_document,
    render_matches,
    write_index,
    write_lint_report,
)
from skillshelf.validation import preflight_validate


def lint_exit_code(report: LintReport, *, strict: bool) -> int:
    """Return 1 if the report has errors (or warnings under ``--strict``)."""
    if not report.ok:
        return 1
    if strict and report.warning_count > 0:
        return 1
    return 0


def handle_list(args: argparse.Namespace) -> int:
    catalog = load_catalog(args.root, load_config(args.root, args.config))
    print(render_catalog_table(catalog))
    return 0


def handle_show(args: argparse.Namespace) -> int:
    catalog = load_catalog(args.root, load_config(args.root, args.config))
    document = catalog.get(args.slug)
    if args.code_only:
        print(render_code_blocks(document))
    else:
        print(render_document(document, color=sys.stdout.isatty()))
    return 0


def handle_select(args: argparse.Namespace) -> int:
    catalog = load_catalog(args.root, load_config(args.root, args.config))
    matches = catalog.select(" ".join(args.query), limit=args.limit)
    print(render_matches(matches))
    return 0 if matches else 1


def handle_lint(args: argparse.Namespace) -> int:
    config = load_config(args.root, args.config)
    report = lint_workspace(args.root, config)
    if args.output is not None:
        write_lint_report(args.output, report)

    exit_code = lint_exit_code(report, strict=args.strict)
    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = LintStdoutReporter(report, color=use_color, verbose=args.verbose, strict=args.strict)
        print(reporter.render())
    return exit_code


def handle_index(args: argparse.Namespace) -> int:
    catalog = load_catalog(args.root, load_config(args.root, args.config))
    entries = build_index(catalog)
    if args.output is None:
        sys.stdout.write(dump_json_text(entries))
    else:
        write_index(args.output, entries)
        print(f"Wrote index of {len(entries)} skills to {args.output}")
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_guard_git(stdin: TextIO, stderr: TextIO) -> int:
    return run_git_guard(stdin, stderr)

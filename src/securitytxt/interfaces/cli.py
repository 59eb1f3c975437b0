"""Command line: lint security.txt files or run the API."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from securitytxt import __version__
from securitytxt.application.dto.parser_options import ParserOptions
from securitytxt.application.use_cases.lint_document import LintDocumentUseCase
from securitytxt.config import Settings
from securitytxt.interfaces.serialization import report_to_dict

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_UNREADABLE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="securitytxt", description="security.txt parser and validator")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    lint = sub.add_parser("lint", help="Report every problem in security.txt files")
    lint.add_argument("paths", nargs="+", help="Files, or directories whose files are all linted")
    lint.add_argument("--json", action="store_true", help="Print a JSON report")
    lint.add_argument("--require-https", action="store_true", help="Reject non-https URLs")
    lint.add_argument("--skip-blank-lines", action="store_true", help="Ignore blank lines")
    lint.add_argument("--trim-language-tags", action="store_true", help="Strip spaces around language tags")

    sub.add_parser("serve", help="Run the HTTP API")
    return parser


def iter_input_files(paths: list[str]) -> list[Path]:
    """Expand directories to their regular files (sorted by name). Missing paths raise FileNotFoundError."""
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(p for p in path.iterdir() if p.is_file()))
        elif path.is_file():
            files.append(path)
        else:
            raise FileNotFoundError(f"No such file or directory: {raw}")
    return files


def lint_paths(
    paths: list[str],
    options: ParserOptions,
    as_json: bool = False,
    out: TextIO | None = None,
) -> int:
    """Lint every file under paths and print the findings. Returns the exit code."""
    if out is None:
        out = sys.stdout
    try:
        files = iter_input_files(paths)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return EXIT_UNREADABLE

    lint_document = LintDocumentUseCase(options)
    has_issues = False
    unreadable = False
    json_reports: list[dict] = []
    for file in files:
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", file, e)
            unreadable = True
            continue
        report = lint_document.execute(text)
        if report.issues:
            has_issues = True
        if as_json:
            json_reports.append({"path": str(file), **report_to_dict(report)})
            continue
        for issue in report.issues:
            if issue.line_number is not None:
                print(f"Errored in {file}, line {issue.line_number}: {issue.message}", file=out)
            else:
                print(f"Failed parsing file {file}: {issue.message}", file=out)

    if as_json:
        json.dump({"files": json_reports}, out, indent=2)
        out.write("\n")
    if unreadable:
        return EXIT_UNREADABLE
    return EXIT_ISSUES if has_issues else EXIT_OK


def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or Settings()
    if args.command == "serve":
        from securitytxt.main import run_server

        run_server(settings)
        return EXIT_OK

    options = ParserOptions(
        require_https=args.require_https or settings.require_https,
        skip_blank_lines=args.skip_blank_lines or settings.skip_blank_lines,
        trim_language_tags=args.trim_language_tags or settings.trim_language_tags,
    )
    return lint_paths(args.paths, options, as_json=args.json)

# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from pydantic import ValidationError

from .errors import CopyrighterError
from .logging_setup import default_log_path, setup_logging
from .runner import run
from .settings import CopyrighterSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="copyrighter",
        description="Inject the first comment of the notice file into every source file.",
    )
    parser.add_argument("root", nargs="?", help="Directory to process (default: current directory)")
    parser.add_argument("-r", "--recurse", action="store_true", default=None, help="Recurse sub-directories")
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Verbose")
    parser.add_argument("-x", "--exclude", help="Comma-separated list of extensions to exclude")
    parser.add_argument("--notice-file", help="File whose first comment is the notice (default: copyright.go)")
    parser.add_argument(
        "--pattern",
        action="append",
        dest="patterns",
        metavar="ENTRY",
        help="+glob or -glob on the relative path; the last match wins (repeatable)",
    )
    parser.add_argument(
        "--skip-nested",
        action="append",
        dest="nested_markers",
        metavar="NAME",
        help="Skip sub-directories that contain this file (repeatable)",
    )
    parser.add_argument("--year", type=int, help="Year substituted for the year token (default: current year)")
    parser.add_argument("--year-token", help="Placeholder replaced by the year (default: YYYY)")
    parser.add_argument("--check", action="store_true", default=None, help="Report files that would change, write nothing")
    parser.add_argument(
        "--log-file",
        nargs="?",
        const=default_log_path(),
        help="Also log to a rotating file (default location when no path is given)",
    )
    return parser


def _overrides(args: argparse.Namespace) -> Dict[str, object]:
    keys = (
        "root",
        "recurse",
        "verbose",
        "check",
        "exclude",
        "notice_file",
        "patterns",
        "nested_markers",
        "year",
        "year_token",
        "log_file",
    )
    return {key: getattr(args, key) for key in keys if getattr(args, key, None) is not None}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = CopyrighterSettings(**_overrides(args))
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        return 2

    try:
        setup_logging(settings.verbose, settings.log_file)
    except OSError as exc:
        print(f"Error: unable to open log file '{settings.log_file}': {exc}", file=sys.stderr)
        return 1
    logger.info("Copyrighter")
    try:
        report = run(settings)
    except CopyrighterError as exc:
        logger.debug("run aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if settings.check:
        if report.changed:
            print("Missing or outdated notice in:")
            for path in report.changed:
                print(" -", path)
            return 1
        print("All notices OK.")
    return 0


__all__ = ["build_parser", "main"]

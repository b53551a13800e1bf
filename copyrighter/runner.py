# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Apply the canonical notice to every supported file under a directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from .errors import (
    DirectoryUnreadable,
    FileReadFailure,
    FileWriteFailure,
    NoticeNotFound,
    NoticeSourceUnreadable,
)
from .languages import CommentStyle, style_for_path
from .patterns import PatternList
from .scanner import detect_first_comment
from .settings import CopyrighterSettings
from .writer import Action, rewrite

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    notice: str
    check: bool = False
    inserted: List[Path] = field(default_factory=list)
    replaced: List[Path] = field(default_factory=list)
    unchanged: List[Path] = field(default_factory=list)

    @property
    def scanned(self) -> int:
        return len(self.inserted) + len(self.replaced) + len(self.unchanged)

    @property
    def changed(self) -> List[Path]:
        return sorted(self.inserted + self.replaced)

    def record(self, path: Path, action: Action) -> None:
        if action is Action.INSERT:
            self.inserted.append(path)
        elif action is Action.REPLACE:
            self.replaced.append(path)
        else:
            self.unchanged.append(path)

    def summary(self) -> str:
        verb = "Would update" if self.check else "Updated"
        return (
            f"Scanned {self.scanned} files. {verb} {len(self.changed)} "
            f"({len(self.inserted)} inserted, {len(self.replaced)} replaced)."
        )


@dataclass(frozen=True)
class WalkOptions:
    root: Path
    notice_path: Path
    recurse: bool = False
    check: bool = False
    exclude: FrozenSet[str] = frozenset()
    patterns: PatternList = PatternList()
    nested_markers: Tuple[str, ...] = ()

    @classmethod
    def from_settings(cls, settings: CopyrighterSettings) -> "WalkOptions":
        return cls(
            root=settings.root,
            notice_path=settings.notice_path().resolve(),
            recurse=settings.recurse,
            check=settings.check,
            exclude=settings.exclude,
            patterns=PatternList.parse(settings.patterns),
            nested_markers=settings.nested_markers,
        )


def load_notice(path: Path, year_token: str = "", year: Optional[int] = None) -> str:
    """Return the first comment of ``path`` with the year placeholder filled in."""

    style, ok = style_for_path(path)
    if not ok:
        raise NoticeSourceUnreadable(f"'{path}' is not a file type with known comment markers", path)
    try:
        source = path.read_bytes().decode("utf-8", "surrogateescape")
    except OSError as exc:
        raise NoticeSourceUnreadable(f"unable to read '{path}': {exc}", path) from exc
    detected = detect_first_comment(source, style)
    if not detected.found:
        raise NoticeNotFound(f"no comment found in '{path}'", path)
    notice = detected.text
    if year_token and year is not None:
        notice = notice.replace(year_token, str(year))
    return notice


def process_file(
    path: Path, notice: str, style: CommentStyle, report: RunReport, check: bool = False
) -> Action:
    try:
        source = path.read_bytes().decode("utf-8", "surrogateescape")
    except OSError as exc:
        raise FileReadFailure(f"unable to read '{path}': {exc}", path) from exc

    plan, data = rewrite(source, style, notice)
    if data is None:
        report.record(path, plan.action)
        logger.debug("up to date: %s", path)
        return plan.action

    if not check:
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise FileWriteFailure(f"failed to overwrite '{path}': {exc}", path) from exc
    report.record(path, plan.action)
    logger.info("  %s (%s)", path, plan.action.value)
    return plan.action


def process_dir(directory: Path, notice: str, options: WalkOptions, report: RunReport) -> None:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise DirectoryUnreadable(f"unable to read files in '{directory}': {exc}", directory) from exc

    for entry in entries:
        if entry.is_dir():
            if entry.is_symlink() or not options.recurse:
                continue
            if _is_nested_project(entry, options.nested_markers):
                logger.debug("skipping nested project: %s", entry)
                continue
            process_dir(entry, notice, options, report)
            continue
        if not entry.is_file():
            continue
        style, ok = style_for_path(entry)
        if not ok or entry.suffix in options.exclude:
            continue
        if not options.patterns.allows(entry.relative_to(options.root).as_posix()):
            logger.debug("excluded by pattern: %s", entry)
            continue
        if entry.resolve() == options.notice_path:
            continue
        process_file(entry, notice, style, report, check=options.check)


def run(settings: CopyrighterSettings) -> RunReport:
    """Load the notice named by ``settings`` and apply it under ``settings.root``."""

    notice = load_notice(settings.notice_path(), settings.year_token, settings.resolved_year())
    report = RunReport(notice=notice, check=settings.check)
    process_dir(settings.root, notice, WalkOptions.from_settings(settings), report)
    logger.info(report.summary())
    return report


def _is_nested_project(directory: Path, markers: Tuple[str, ...]) -> bool:
    return any((directory / name).exists() for name in markers)

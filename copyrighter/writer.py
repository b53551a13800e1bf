# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Emission of a file's new header comment."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .languages import CommentStyle
from .scanner import NOT_FOUND, DetectedComment, detect_first_comment, is_interpreter_line

_KEYWORD = "copyright"


class Action(str, enum.Enum):
    SKIP = "skip"
    INSERT = "insert"
    REPLACE = "replace"


@dataclass(frozen=True)
class Plan:
    action: Action
    detected: DetectedComment


def plan_rewrite(detected: DetectedComment, notice: str) -> Plan:
    """Decide what to do with a file whose first comment is ``detected``.

    A comment that already equals the notice is left alone. A comment that
    does not mention a copyright (a package doc comment, say) is kept and the
    notice goes in front of it. Anything else is replaced.
    """

    if detected.found and detected.text == notice:
        return Plan(Action.SKIP, detected)
    if not detected.found or _KEYWORD not in detected.text.lower():
        return Plan(Action.INSERT, NOT_FOUND)
    return Plan(Action.REPLACE, detected)


def line_separator(source: str) -> str:
    return "\r\n" if "\r\n" in source else "\n"


def render_comment(style: CommentStyle, notice: str, sep: str = "\n") -> str:
    """Format ``notice`` as a comment, including the trailing separator."""

    notice_lines = notice.split("\n")
    if style.supports_block:
        return sep.join([style.block_start, *notice_lines, style.block_end]) + sep
    prefix = style.line_prefix + " "
    return sep.join(prefix + line for line in notice_lines) + sep


def apply_notice(
    source: str, detected: DetectedComment, style: CommentStyle, notice: str
) -> Tuple[bytes, bool]:
    """Return ``source`` with ``notice`` written over ``detected`` or in front of the body.

    Callers are expected to have run :func:`plan_rewrite` first; an unfound
    ``detected`` means insert.
    """

    sep = line_separator(source)
    lines = source.split("\n")
    if detected.found:
        start, end = detected.start_line, detected.end_line
    else:
        start = end = _insertion_point(lines)

    out: List[str] = [line + "\n" for line in lines[:start]]
    out.append(render_comment(style, notice, sep))
    if not detected.found and start < len(lines) and _content(lines[start]):
        out.append(sep)
    out.append("\n".join(lines[end:]))
    return "".join(out).encode("utf-8", "surrogateescape"), True


def rewrite(source: str, style: CommentStyle, notice: str) -> Tuple[Plan, Optional[bytes]]:
    """Scan, decide and emit in one go. The bytes are ``None`` when the file is current."""

    plan = plan_rewrite(detect_first_comment(source, style), notice)
    if plan.action is Action.SKIP:
        return plan, None
    data, _ = apply_notice(source, plan.detected, style, notice)
    return plan, data


def _insertion_point(lines: List[str]) -> int:
    # "#!" must stay the first line
    return 1 if is_interpreter_line(lines[0]) else 0


def _content(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line

# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Detection of the leading comment of a source file.

Only two shapes are recognized:

* a run of consecutive lines that each start with the line prefix
  (``// ...`` or ``# ...``), and
* a block whose start and end delimiters each sit alone on their own line::

      /*
      Copyright ...
      */

A block opener followed by other text on the same line (``/* text */`` or
``/* text``) ends the search without a match. Lines before the first comment
that are not comments (a ``package`` clause, blank lines) are passed over.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .languages import CommentStyle

# A comment must open within this many lines of the top of the file.
MAX_SCAN_LINES = 1024


@dataclass(frozen=True)
class DetectedComment:
    """Result of a scan.

    ``start_line``/``end_line`` are the zero-based, half-open range of lines of
    the scanned source taken up by the comment, delimiter lines included.
    """

    text: str = ""
    found: bool = False
    start_line: int = 0
    end_line: int = 0


NOT_FOUND = DetectedComment()


def detect_first_comment(source: str, style: CommentStyle) -> DetectedComment:
    """Return the first comment of ``source`` written in ``style``."""
    if not source:
        return NOT_FOUND
    return scan_lines(source.split("\n"), style)


def scan_lines(lines: Sequence[str], style: CommentStyle) -> DetectedComment:
    for index, line in enumerate(lines[:MAX_SCAN_LINES]):
        if index == 0 and is_interpreter_line(line):
            continue
        trimmed = line.strip()
        if style.supports_block and trimmed.startswith(style.block_start):
            if trimmed != style.block_start:
                return NOT_FOUND
            return _read_block(lines, index, style)
        if style.supports_line and trimmed.startswith(style.line_prefix):
            return _read_line_run(lines, index, style)
    return NOT_FOUND


def is_interpreter_line(line: str) -> bool:
    return line.startswith("#!")


def _read_block(lines: Sequence[str], start: int, style: CommentStyle) -> DetectedComment:
    texts: List[str] = []
    for index in range(start + 1, len(lines)):
        line = _chomp(lines[index])
        if line.strip() == style.block_end:
            return DetectedComment("\n".join(texts), True, start, index + 1)
        texts.append(line.rstrip(" "))
    # unterminated
    return NOT_FOUND


def _read_line_run(lines: Sequence[str], start: int, style: CommentStyle) -> DetectedComment:
    prefix = style.line_prefix
    texts: List[str] = []
    end = len(lines)
    for index in range(start, len(lines)):
        line = _chomp(lines[index]).lstrip()
        if not line.startswith(prefix):
            end = index
            break
        remainder = line[len(prefix):]
        if remainder.startswith(" "):
            remainder = remainder[1:]
        texts.append(remainder)
    return DetectedComment("\n".join(texts), True, start, end)


def _chomp(line: str) -> str:
    if line.endswith("\r"):
        return line[:-1]
    return line

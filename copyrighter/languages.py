# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Comment markers per file extension."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union


@dataclass(frozen=True)
class CommentStyle:
    """Comment tokens of a language. An empty token means the form is unsupported."""

    line_prefix: str = ""
    block_start: str = ""
    block_end: str = ""

    @property
    def supports_line(self) -> bool:
        return bool(self.line_prefix)

    @property
    def supports_block(self) -> bool:
        return bool(self.block_start and self.block_end)

    @property
    def is_supported(self) -> bool:
        return self.supports_line or self.supports_block


UNSUPPORTED = CommentStyle()

_C_LIKE = CommentStyle("//", "/*", "*/")
_HASH = CommentStyle("#", "", "")
_MARKUP = CommentStyle("", "<!--", "-->")

_TABLE: Dict[str, CommentStyle] = {
    ".go": _C_LIKE,
    ".js": _C_LIKE,
    ".ts": _C_LIKE,
    ".cs": _C_LIKE,
    ".java": _C_LIKE,
    ".c": _C_LIKE,
    ".cpp": _C_LIKE,
    ".php": _C_LIKE,
    ".py": _HASH,
    ".css": CommentStyle("", "/*", "*/"),
    ".xml": _MARKUP,
    ".html": _MARKUP,
    ".yaml": _HASH,
    ".yml": _HASH,
    ".ps1": CommentStyle("#", "<#", "#>"),
    ".sh": _HASH,
    ".sql": CommentStyle("--", "/*", "*/"),
}


def _validated(table: Mapping[str, CommentStyle]) -> Mapping[str, CommentStyle]:
    for ext, style in table.items():
        if not ext.startswith("."):
            raise ValueError(f"extension {ext!r} must start with a dot")
        if bool(style.block_start) != bool(style.block_end):
            raise ValueError(f"{ext}: block delimiters must be given in pairs")
        if not style.is_supported:
            raise ValueError(f"{ext}: no comment form configured")
    return MappingProxyType(dict(table))


LANGUAGES: Mapping[str, CommentStyle] = _validated(_TABLE)


def style_for(extension: str) -> Tuple[CommentStyle, bool]:
    # Case-sensitive on purpose: ".GO" is not ".go".
    style = LANGUAGES.get(extension)
    if style is None:
        return UNSUPPORTED, False
    return style, True


def style_for_path(path: Union[str, PurePath]) -> Tuple[CommentStyle, bool]:
    return style_for(PurePath(path).suffix)

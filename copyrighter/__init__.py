# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Keep a canonical notice at the top of every source file."""

from .languages import LANGUAGES, CommentStyle, style_for, style_for_path
from .scanner import DetectedComment, detect_first_comment
from .writer import Action, apply_notice, plan_rewrite, rewrite

__version__ = "0.1.0"

__all__ = [
    "LANGUAGES",
    "Action",
    "CommentStyle",
    "DetectedComment",
    "apply_notice",
    "detect_first_comment",
    "plan_rewrite",
    "rewrite",
    "style_for",
    "style_for_path",
]

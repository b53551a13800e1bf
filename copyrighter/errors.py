# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Errors that abort a run."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class CopyrighterError(Exception):
    """Base class. ``path`` is the file or directory involved."""

    def __init__(self, message: str, path: Union[str, Path]) -> None:
        super().__init__(message)
        self.path = Path(path)


class NoticeSourceUnreadable(CopyrighterError):
    ...


class NoticeNotFound(CopyrighterError):
    ...


class DirectoryUnreadable(CopyrighterError):
    ...


class FileReadFailure(CopyrighterError):
    ...


class FileWriteFailure(CopyrighterError):
    ...

# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Run configuration, read from ``COPYRIGHTER_*`` variables and CLI overrides."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Annotated, Iterable, Optional, Tuple, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


def _split(value: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    parts = [str(part).strip() for part in value]
    return tuple(part for part in parts if part)


def normalize_extension(ext: str) -> str:
    return "." + ext.strip().lstrip(".")


class CopyrighterSettings(BaseSettings):
    root: Path = Path(".")
    notice_file: str = "copyright.go"
    recurse: bool = False
    verbose: bool = False
    check: bool = False
    exclude: Annotated[frozenset[str], NoDecode] = frozenset()
    patterns: Annotated[Tuple[str, ...], NoDecode] = ()
    nested_markers: Annotated[Tuple[str, ...], NoDecode] = ()
    year_token: str = "YYYY"
    year: Optional[int] = None
    log_file: Optional[Path] = None

    model_config = {
        "env_prefix": "COPYRIGHTER_",
        "env_file": ".env",
        "extra": "ignore",
        "frozen": True,
        "populate_by_name": True,
    }

    @field_validator("exclude", mode="before")
    @classmethod
    def _parse_exclude(cls, value):
        return frozenset(normalize_extension(ext) for ext in _split(value))

    @field_validator("patterns", "nested_markers", mode="before")
    @classmethod
    def _parse_list(cls, value):
        return _split(value)

    def notice_path(self) -> Path:
        path = Path(self.notice_file).expanduser()
        if path.is_absolute():
            return path
        return self.root / path

    def resolved_year(self) -> int:
        return self.year if self.year is not None else datetime.now().year

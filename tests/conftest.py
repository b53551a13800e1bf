# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _reset_copyrighter_logger():
    logger = logging.getLogger("copyrighter")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def notice_tree(tmp_path: Path) -> Path:
    (tmp_path / "copyright.go").write_text(
        "/*\nCopyright YYYY Acme Corp\n\nAll rights reserved.\n*/\n\npackage acme\n",
        encoding="utf-8",
    )
    (tmp_path / "a.go").write_text("package acme\n\nvar a = 1\n", encoding="utf-8")
    (tmp_path / "b.py").write_text("print('b')\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not source\n", encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.go").write_text("// Copyright 2001 Someone Else\npackage sub\n", encoding="utf-8")
    return tmp_path

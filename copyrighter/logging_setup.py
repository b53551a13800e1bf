# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from platformdirs import PlatformDirs

LOGGER_NAME = "copyrighter"


def default_log_path() -> Path:
    dirs = PlatformDirs(appname="copyrighter", appauthor=False)
    return Path(dirs.user_log_dir) / "copyrighter.log"


def setup_logging(verbose: bool = False, log_path: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_path else logging.INFO)
    level = logging.INFO if verbose else logging.WARNING

    console = next(
        (h for h in logger.handlers if type(h) is logging.StreamHandler),
        None,
    )
    if console is None:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console)
    console.setLevel(level)

    if log_path is not None and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    return logger

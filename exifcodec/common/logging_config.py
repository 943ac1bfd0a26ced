# exifcodec/common/logging_config.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class LogDefaults:
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    level: int = logging.WARNING
    file_level: int = logging.INFO


DEFAULTS = LogDefaults()


def configure_logging(*, verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Console logging for the CLI, plus an optional file handler (idempotent).
    Library modules only create loggers; handlers are set up here.
    """
    root = logging.getLogger()
    level = logging.DEBUG if verbose else DEFAULTS.level

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(DEFAULTS.fmt))
        root.addHandler(sh)
    root.setLevel(level)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    target = str(log_file.resolve())
    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target:
            return

    fh = logging.FileHandler(log_file, encoding="utf-8", delay=True)
    fh.setLevel(logging.DEBUG if verbose else DEFAULTS.file_level)
    fh.setFormatter(logging.Formatter(DEFAULTS.fmt))
    root.addHandler(fh)

    if root.level > fh.level:
        root.setLevel(fh.level)

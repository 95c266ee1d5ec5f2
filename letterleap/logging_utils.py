"""
Logger setup for hosts embedding the engine.

Library modules only call logging.getLogger(__name__); nothing here runs on
import. A host (web view, notebook, test session) calls setup_logger once to
see submissions and dictionary loads.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
        name: str = "letterleap",
        level: int = logging.INFO,
        log_dir: Path | str | None = None,
        console: bool = True,
) -> logging.Logger:
    """
    Attach console and/or file handlers to the named logger.

    Existing handlers are replaced, so calling this twice does not duplicate
    output. With log_dir set, records also go to <log_dir>/<name>.log.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if console:
        h = logging.StreamHandler(sys.stdout)
        h.setLevel(level)
        h.setFormatter(formatter)
        logger.addHandler(h)

    if log_dir is not None:
        d = Path(log_dir)
        d.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(d / f"{name}.log", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger

"""Logging setup for the agecalc command line."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    *,
    level: int = logging.INFO,
    force: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Initialise the root logger once, writing to stderr by default.

    Results go to stdout, so log records stay on a separate stream. The library
    modules under ``agecalc.domain`` never log; only the application and CLI layers
    do. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=stream or sys.stderr,
        force=force,
    )

"""Stdlib logging setup for the prdiff command line."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configure the ``prdiff`` logger hierarchy.

    Safe to call more than once: only the level changes after the first call.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("prdiff").setLevel(level)

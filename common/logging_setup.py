"""
common.logging_setup

Set up standard logging for the project.
"""
import logging
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO):
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level {level!r}")
        level = resolved
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

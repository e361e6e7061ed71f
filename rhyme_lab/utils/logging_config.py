"""Logging setup for the ``rhyme-lab`` command line tool.

Library callers never need this module: the analyzer only emits through
loggers under ``rhyme_lab`` and leaves handler setup to its host. The CLI
calls :func:`configure_logging` once per run so progress and warnings go to
stderr while stdout stays reserved for the text summary or JSON payload.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

LOG_LEVEL_ENV_VAR = "RHYME_LAB_LOG_LEVEL"
PROJECT_LOGGER = "rhyme_lab"

_CLI_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Marks the handler this module installed so a second call replaces it.
_HANDLER_ATTR = "_rhyme_lab_cli_handler"

LevelLike = Union[str, int, None]


def resolve_log_level(level: LevelLike = None) -> int:
    """Turn ``--log-level`` (or ``RHYME_LAB_LOG_LEVEL``) into a numeric level.

    An explicit ``level`` wins over the environment variable; with neither
    set the CLI logs at ``INFO``. Names are case-insensitive and numeric
    strings are accepted. Unknown names raise :class:`ValueError`.
    """

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level is None or (isinstance(level, str) and not level.strip()):
        return logging.INFO
    if isinstance(level, int):
        return level

    text = level.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    return resolved


def configure_logging(level: LevelLike = None, *, stream: Optional[IO[str]] = None) -> int:
    """Attach a single stderr handler to the ``rhyme_lab`` logger.

    Calling it again swaps the previous handler for a new one, so repeated
    CLI invocations inside one process never duplicate output. Returns the
    level that was applied.
    """

    resolved = resolve_log_level(level)
    project_logger = logging.getLogger(PROJECT_LOGGER)

    for handler in list(project_logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            project_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_CLI_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)

    project_logger.addHandler(handler)
    project_logger.setLevel(resolved)
    return resolved


__all__ = ["LOG_LEVEL_ENV_VAR", "configure_logging", "resolve_log_level"]

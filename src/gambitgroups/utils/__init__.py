"""Shared helpers for Gambit Groups."""

# Gambit Groups
# Copyright (C) 2025  Gambit Groups developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
from datetime import datetime
from typing import Optional, Union

from dateutil.tz import tzutc

from gambitgroups.constants import LOG_LEVEL_ENV_VAR

ROOT_LOGGER_NAME = "gambitgroups"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_stream_handler: Optional[logging.Handler] = None


def setup_logger(name: str) -> logging.Logger:
    """Return the named logger for a module.

    Module loggers live under the ``gambitgroups`` logger, which only has a
    ``NullHandler``; applications (or :func:`configure_logging`) decide where
    records go.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Optional[Union[int, str]] = None, verbose: bool = False
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Args:
        level: Explicit log level; falls back to the environment variable
            and then WARNING
        verbose: Force DEBUG output

    Returns:
        The configured package logger
    """
    global _stream_handler

    if verbose:
        level = logging.DEBUG
    elif level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")

    unknown_level = None
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if isinstance(resolved, int):
            level = resolved
        else:
            unknown_level, level = level, logging.WARNING

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if _stream_handler is None:
        _stream_handler = logging.StreamHandler()
        _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_stream_handler)
    if unknown_level is not None:
        root.warning(f"Unknown log level {unknown_level!r}, using WARNING")
    return root


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(tz=tzutc())


def format_elapsed(start_time: datetime, now: Optional[datetime] = None) -> str:
    """Format the time since ``start_time`` as HH:MM:SS.

    Hours are not wrapped at 24. A start time in the future reads as
    00:00:00.
    """
    if now is None:
        now = utc_now()
    if start_time.tzinfo is None:
        start_time = start_time.replace(tzinfo=tzutc())
    if now.tzinfo is None:
        now = now.replace(tzinfo=tzutc())

    total_seconds = max(0, int((now - start_time).total_seconds()))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

"""Shared utilities for Pairing Planner."""

# Pairing Planner
# Copyright (C) 2025  Pairing Planner developers
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
from typing import Union

from pairingplanner.constants import (
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL_ENV,
    PACKAGE_LOGGER_NAME,
)

_configured = False


def _configure_package_logger() -> None:
    """Attach a single stream handler to the package logger."""
    global _configured
    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        package_logger.addHandler(handler)

    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))
    _configured = True


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` below the package logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Configured logger instance
    """
    _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Change the level of every Pairing Planner logger at once."""
    _configure_package_logger()
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)

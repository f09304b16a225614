"""Exceptions for use in Pairing Planner"""

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

from pairingplanner.constants import (
    REASON_DUPLICATE_PLAYER,
    REASON_EMPTY_ROSTER,
    REASON_INVALID_EXPORT_FORMAT,
    REASON_INVALID_PLAYER_NAME,
    REASON_INVALID_ROUND_COUNT,
    REASON_INVARIANT_VIOLATION,
    REASON_NO_SCHEDULE_YET,
    REASON_PLAYER_NOT_FOUND,
)

# ========== Base Application Exception ==========


class PairingPlannerException(Exception):
    """Base exception for all Pairing Planner errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.

    Subclasses set ``reason`` to a stable identifier that transports report
    to clients next to the human-readable message.
    """

    reason = "Error"


# ========== Validation Exceptions ==========


class ValidationException(PairingPlannerException):
    """Base exception for invalid caller input."""

    reason = "ValidationError"


class EmptyRosterException(ValidationException):
    """Raised when a roster is built from no player names."""

    reason = REASON_EMPTY_ROSTER


class DuplicatePlayerException(ValidationException):
    """Raised when two player names are identical after trimming."""

    reason = REASON_DUPLICATE_PLAYER


class InvalidPlayerNameException(ValidationException):
    """Raised when a player name is blank, not a string, or reserved."""

    reason = REASON_INVALID_PLAYER_NAME


class InvalidRoundCountException(ValidationException):
    """Raised when the requested number of rounds is not a positive integer."""

    reason = REASON_INVALID_ROUND_COUNT


class InvalidExportFormatException(ValidationException):
    """Raised when an unsupported export format is requested."""

    reason = REASON_INVALID_EXPORT_FORMAT


# ========== Schedule Exceptions ==========


class ScheduleException(PairingPlannerException):
    """Base exception for schedule-related errors."""

    pass


class ScheduleNotFoundException(ScheduleException):
    """Raised when a view is requested before any schedule was generated."""

    reason = REASON_NO_SCHEDULE_YET

    def __init__(self, message: str = "No schedule has been generated yet"):
        super().__init__(message)


class ScheduleInvariantException(ScheduleException):
    """Raised when a generated round breaks the one-slot-per-player rule.

    This is a programming error; the schedule is discarded.
    """

    reason = REASON_INVARIANT_VIOLATION


# ========== Player Exceptions ==========


class PlayerNotFoundException(PairingPlannerException):
    """Raised when a requested player is not on the current roster."""

    reason = REASON_PLAYER_NOT_FOUND


# ========== Configuration Exceptions ==========


class ConfigurationException(PairingPlannerException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass

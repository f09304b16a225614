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

# --- Constants ---
APP_NAME = "Pairing Planner"
PACKAGE_LOGGER_NAME = "pairingplanner"

# Logging
LOG_LEVEL_ENV = "PAIRING_PLANNER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Environment variable prefix for settings
ENV_PREFIX = "PAIRING_PLANNER_"

# Bye marker used in exports; reserved as a player name
BYE_MARKER = "BYE"

# Round dates (the planner schedules weekly by default)
DEFAULT_ROUND_INTERVAL_DAYS = 7

# Error reasons (stable, client-visible identifiers)
REASON_EMPTY_ROSTER = "EmptyRoster"
REASON_DUPLICATE_PLAYER = "DuplicatePlayer"
REASON_INVALID_PLAYER_NAME = "InvalidPlayerName"
REASON_INVALID_ROUND_COUNT = "InvalidRoundCount"
REASON_INVALID_EXPORT_FORMAT = "InvalidExportFormat"
REASON_NO_SCHEDULE_YET = "NoScheduleYet"
REASON_PLAYER_NOT_FOUND = "PlayerNotFound"
REASON_INVARIANT_VIOLATION = "InvariantViolation"

# Export formats
EXPORT_CSV = "csv"
EXPORT_XLSX = "xlsx"
EXPORT_FORMATS = (EXPORT_CSV, EXPORT_XLSX)
DEFAULT_EXPORT_FORMAT = EXPORT_CSV

EXPORT_MEDIA_TYPES = {
    # Excel opens this media type directly
    EXPORT_CSV: "application/vnd.ms-excel",
    EXPORT_XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

# Export column headers
COL_ROUND = "Round"
COL_DATE = "Date"
COL_PLAYER_A = "Player A"
COL_PLAYER_B = "Player B"
XLSX_SHEET_TITLE = "Schedule"

# HTTP
API_PREFIX = "/planer"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

"""Read-side views over a generated schedule.

This package derives per-player usage, per-player schedules, pairing
frequencies and summary statistics. None of the functions mutate the
schedule they are given.
"""

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

from pairingplanner.analysis.statistics import (
    PairingFrequency,
    ScheduleStatistics,
    compute_statistics,
    pairing_frequencies,
)
from pairingplanner.analysis.usage import (
    PlayerRound,
    UsageRecord,
    compute_usage,
    player_schedule,
)

__all__ = [
    "UsageRecord",
    "PlayerRound",
    "compute_usage",
    "player_schedule",
    "ScheduleStatistics",
    "PairingFrequency",
    "compute_statistics",
    "pairing_frequencies",
]

"""Schedule planning operations.

This module ties roster validation, schedule generation, the schedule store
and the read-side views together into the operations the transports expose.
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

from datetime import date
from typing import Dict, Iterable, List, Optional

from pairingplanner.analysis import (
    PairingFrequency,
    PlayerRound,
    ScheduleStatistics,
    UsageRecord,
    compute_statistics,
    compute_usage,
    pairing_frequencies,
    player_schedule,
)
from pairingplanner.config import PlannerSettings
from pairingplanner.controllers.schedule_store import ScheduleStore
from pairingplanner.export import ExportFile, export_schedule
from pairingplanner.models.roster import build_roster
from pairingplanner.models.schedule import Schedule
from pairingplanner.pairing import generate_schedule
from pairingplanner.type_hints import PlayerName
from pairingplanner.utils import setup_logger

logger = setup_logger(__name__)


class SchedulePlanner:
    """Generates schedules and answers queries about the current one.

    This class is responsible for:
    - Validating roster and round count input
    - Generating the schedule outside of any lock
    - Publishing the finished schedule to its store
    - Serving usage, statistics and export views of the current schedule
    """

    def __init__(
        self,
        store: Optional[ScheduleStore] = None,
        settings: Optional[PlannerSettings] = None,
    ):
        """Initialize the planner.

        Args:
            store: Store holding the current schedule; a fresh one by default
            settings: Runtime settings; defaults are used when omitted
        """
        self.store = store if store is not None else ScheduleStore()
        self.settings = settings if settings is not None else PlannerSettings()

    def generate(
        self,
        player_names: Iterable[str],
        number_of_rounds: int,
        start_date: Optional[date] = None,
    ) -> Schedule:
        """Generate a schedule and make it the current one.

        Args:
            player_names: Player names in seating order
            number_of_rounds: Rounds to schedule (at least 1)
            start_date: Optional date of the first round

        Returns:
            The newly published schedule

        Raises:
            ValidationException: If the roster or round count is invalid;
                the current schedule is left untouched
            ScheduleInvariantException: If generation produced an inconsistent
                round; the current schedule is left untouched
        """
        roster = build_roster(player_names)
        logger.info(
            "Received schedule generation request with %d players and %s rounds",
            len(roster),
            number_of_rounds,
        )

        schedule = generate_schedule(
            roster,
            number_of_rounds,
            start_date=start_date,
            interval_days=self.settings.round_interval_days,
        )
        self.store.replace(schedule)

        logger.info(
            "Schedule generation completed: %d rounds, cycle length %d",
            schedule.number_of_rounds,
            schedule.cycle_length,
        )
        return schedule

    def pairings(self) -> Schedule:
        """Return the current schedule.

        Raises:
            ScheduleNotFoundException: If nothing has been generated yet
        """
        return self.store.current()

    def player_usage(self) -> Dict[PlayerName, UsageRecord]:
        return compute_usage(self.store.current())

    def statistics(self) -> ScheduleStatistics:
        return compute_statistics(self.store.current())

    def pairing_frequencies(self) -> List[PairingFrequency]:
        return pairing_frequencies(self.store.current())

    def player_schedule(self, player: PlayerName) -> List[PlayerRound]:
        """Return one player's opponents round by round.

        Raises:
            ScheduleNotFoundException: If nothing has been generated yet
            PlayerNotFoundException: If the player is not on the roster
        """
        return player_schedule(self.store.current(), player)

    def download(self, fmt: Optional[str] = None) -> ExportFile:
        """Export the current schedule.

        When ``settings.export_dir`` is configured the file is also kept there.

        Args:
            fmt: ``csv`` or ``xlsx``; the configured default when omitted

        Returns:
            The rendered export

        Raises:
            ScheduleNotFoundException: If nothing has been generated yet
            InvalidExportFormatException: If the format is not supported
        """
        schedule = self.store.current()
        export = export_schedule(schedule, fmt or self.settings.export_format)
        if self.settings.export_dir is not None:
            export.save(self.settings.export_dir)
        return export

"""Single-slot, thread-safe holder of the current schedule."""

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

import threading
from typing import Optional

from pairingplanner.exceptions import ScheduleNotFoundException
from pairingplanner.models.schedule import Schedule
from pairingplanner.utils import setup_logger

logger = setup_logger(__name__)


class ScheduleStore:
    """Holds the most recently generated schedule.

    Schedules are immutable, so publishing one is a reference swap. The lock
    is held only for that swap; generation happens before ``replace`` is called.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._schedule: Optional[Schedule] = None

    def current(self) -> Schedule:
        """Get the current schedule.

        Raises:
            ScheduleNotFoundException: If nothing has been generated yet
        """
        with self._lock:
            schedule = self._schedule
        if schedule is None:
            raise ScheduleNotFoundException()
        return schedule

    def has_schedule(self) -> bool:
        with self._lock:
            return self._schedule is not None

    def replace(self, schedule: Schedule) -> None:
        """Publish ``schedule`` as the current one."""
        with self._lock:
            self._schedule = schedule
        logger.debug(
            "Published schedule with %d rounds for %d players",
            schedule.number_of_rounds,
            len(schedule.roster),
        )

    def clear(self) -> None:
        with self._lock:
            self._schedule = None

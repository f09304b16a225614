"""Flat tabular view of a schedule shared by every export format."""

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

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from pairingplanner.constants import (
    BYE_MARKER,
    COL_DATE,
    COL_PLAYER_A,
    COL_PLAYER_B,
    COL_ROUND,
)
from pairingplanner.models.schedule import Schedule
from pairingplanner.type_hints import PlayerName


@dataclass(frozen=True)
class ExportRow:
    """One exported line: a pairing, or a bye when ``player_b`` is ``BYE``."""

    round_number: int
    player_a: PlayerName
    player_b: str
    round_date: Optional[date] = None

    @property
    def is_bye(self) -> bool:
        return self.player_b == BYE_MARKER


def header(dated: bool) -> List[str]:
    if dated:
        return [COL_ROUND, COL_DATE, COL_PLAYER_A, COL_PLAYER_B]
    return [COL_ROUND, COL_PLAYER_A, COL_PLAYER_B]


def schedule_rows(schedule: Schedule) -> List[ExportRow]:
    """Flatten ``schedule``: rounds ascending, pairings in generator order, bye last."""
    rows = []
    for round_data in schedule.rounds:
        for pairing in round_data.pairings:
            rows.append(
                ExportRow(
                    round_number=round_data.round_number,
                    player_a=pairing.player_a,
                    player_b=pairing.player_b,
                    round_date=round_data.round_date,
                )
            )
        if round_data.bye_player is not None:
            rows.append(
                ExportRow(
                    round_number=round_data.round_number,
                    player_a=round_data.bye_player,
                    player_b=BYE_MARKER,
                    round_date=round_data.round_date,
                )
            )
    return rows


def row_values(row: ExportRow, dated: bool) -> list:
    if dated:
        date_value = row.round_date.isoformat() if row.round_date else ""
        return [row.round_number, date_value, row.player_a, row.player_b]
    return [row.round_number, row.player_a, row.player_b]

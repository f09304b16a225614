"""Per-player participation views over a schedule."""

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
from typing import Dict, List, Optional

from pairingplanner.exceptions import PlayerNotFoundException
from pairingplanner.models.schedule import Schedule
from pairingplanner.type_hints import MaybePlayer, PlayerName


@dataclass
class UsageRecord:
    """How often a player plays and sits out across a schedule."""

    appearances: int = 0
    byes: int = 0

    @property
    def rounds(self) -> int:
        return self.appearances + self.byes

    def to_dict(self) -> Dict[str, int]:
        return {"appearances": self.appearances, "byes": self.byes}


@dataclass(frozen=True)
class PlayerRound:
    """One round from a single player's point of view.

    ``opponent`` is None when the player has the bye.
    """

    round_number: int
    opponent: MaybePlayer
    round_date: Optional[date] = None

    @property
    def is_bye(self) -> bool:
        return self.opponent is None

    def to_dict(self) -> Dict:
        data = {"round": self.round_number, "opponent": self.opponent}
        if self.round_date is not None:
            data["date"] = self.round_date.isoformat()
        return data


def compute_usage(schedule: Schedule) -> Dict[PlayerName, UsageRecord]:
    """Count appearances and byes for every roster player, in roster order."""
    usage = {player: UsageRecord() for player in schedule.players}

    for round_data in schedule.rounds:
        for pairing in round_data.pairings:
            usage[pairing.player_a].appearances += 1
            usage[pairing.player_b].appearances += 1
        if round_data.bye_player is not None:
            usage[round_data.bye_player].byes += 1

    return usage


def player_schedule(schedule: Schedule, player: PlayerName) -> List[PlayerRound]:
    """List the opponent (or bye) of ``player`` in every round.

    Args:
        schedule: Schedule to look in
        player: Player name; surrounding whitespace is ignored

    Returns:
        One entry per round in ascending order

    Raises:
        PlayerNotFoundException: If the player is not on the roster
    """
    name = player.strip()
    if name not in schedule.roster:
        raise PlayerNotFoundException(f"Player '{name}' is not in this schedule")

    entries = []
    for round_data in schedule.rounds:
        opponent = None
        for pairing in round_data.pairings:
            if pairing.involves(name):
                opponent = pairing.opponent_of(name)
                break
        entries.append(
            PlayerRound(
                round_number=round_data.round_number,
                opponent=opponent,
                round_date=round_data.round_date,
            )
        )
    return entries

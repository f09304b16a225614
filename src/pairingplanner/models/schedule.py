"""Data models for a generated schedule."""

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
from typing import Any, Dict, Iterator, Optional, Tuple

from dateutil.parser import isoparse

from pairingplanner.models.roster import Roster, build_roster
from pairingplanner.type_hints import MaybePlayer, PairKey, PlayerName


def _date_to_str(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _date_from_str(value: Optional[str]) -> Optional[date]:
    return isoparse(value).date() if value else None


@dataclass(frozen=True)
class Pairing:
    """Two players matched together within a round.

    Attributes
    ----------
    player_a : str
        Player on the lower seat of the circle.
    player_b : str
        Player on the mirrored seat.
    """

    player_a: PlayerName
    player_b: PlayerName

    @property
    def key(self) -> PairKey:
        """Unordered identity of the pair."""
        return frozenset({self.player_a, self.player_b})

    def involves(self, player: PlayerName) -> bool:
        return player == self.player_a or player == self.player_b

    def opponent_of(self, player: PlayerName) -> PlayerName:
        """Return the other player of this pairing."""
        if player == self.player_a:
            return self.player_b
        if player == self.player_b:
            return self.player_a
        raise ValueError(f"{player} is not part of {self}")

    def to_dict(self) -> Dict[str, Any]:
        return {"playerA": self.player_a, "playerB": self.player_b}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        return cls(player_a=data["playerA"], player_b=data["playerB"])

    def __str__(self) -> str:
        return f"{self.player_a} vs {self.player_b}"


@dataclass(frozen=True)
class RoundData:
    """Container for all data related to a single scheduled round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : tuple of Pairing
        Pairings in the order the generator produced them.
    bye_player : str or None
        Player sitting out this round, or None for even rosters.
    round_date : date or None
        Calendar date of the round when the schedule was dated.
    """

    round_number: int
    pairings: Tuple[Pairing, ...] = ()
    bye_player: MaybePlayer = None
    round_date: Optional[date] = None

    def players(self) -> Iterator[PlayerName]:
        """Yield every player slotted into this round, bye included."""
        for pairing in self.pairings:
            yield pairing.player_a
            yield pairing.player_b
        if self.bye_player is not None:
            yield self.bye_player

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        data: Dict[str, Any] = {
            "round": self.round_number,
            "pairings": [p.to_dict() for p in self.pairings],
            "bye": self.bye_player,
        }
        if self.round_date is not None:
            data["date"] = _date_to_str(self.round_date)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=int(data["round"]),
            pairings=tuple(Pairing.from_dict(p) for p in data.get("pairings", [])),
            bye_player=data.get("bye"),
            round_date=_date_from_str(data.get("date")),
        )


@dataclass(frozen=True)
class Schedule:
    """An immutable, complete round-robin schedule.

    Attributes
    ----------
    roster : Roster
        The players the schedule was generated for.
    rounds : tuple of RoundData
        Rounds in ascending order.
    cycle_length : int
        Rounds in the natural cycle before pairings repeat.
    start_date : date or None
        Date of round one when the schedule is dated.
    interval_days : int
        Days between consecutive dated rounds.
    """

    roster: Roster
    rounds: Tuple[RoundData, ...]
    cycle_length: int
    start_date: Optional[date] = None
    interval_days: int = 7

    @property
    def number_of_rounds(self) -> int:
        return len(self.rounds)

    @property
    def players(self) -> Tuple[PlayerName, ...]:
        return self.roster.players

    @property
    def is_dated(self) -> bool:
        return self.start_date is not None

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round (1-indexed), or None if out of range."""
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the schedule to dictionary."""
        return {
            "players": list(self.roster.players),
            "numberOfRounds": self.number_of_rounds,
            "cycleLength": self.cycle_length,
            "startDate": _date_to_str(self.start_date),
            "intervalDays": self.interval_days,
            "rounds": [r.to_dict() for r in self.rounds],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Schedule":
        """Deserialize a schedule from dictionary."""
        return cls(
            roster=build_roster(data["players"]),
            rounds=tuple(RoundData.from_dict(r) for r in data.get("rounds", [])),
            cycle_length=int(data["cycleLength"]),
            start_date=_date_from_str(data.get("startDate")),
            interval_days=int(data.get("intervalDays", 7)),
        )

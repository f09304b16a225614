"""Roster data model and construction."""

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
from typing import Any, Dict, Iterable, Iterator, Tuple

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from pairingplanner.constants import BYE_MARKER
from pairingplanner.exceptions import (
    DuplicatePlayerException,
    EmptyRosterException,
    InvalidPlayerNameException,
)
from pairingplanner.type_hints import PlayerName


@dataclass(frozen=True)
class Roster:
    """Ordered, validated set of distinct player names.

    Attributes
    ----------
    players : tuple of str
        Player names in input order. The order seeds the pairing algorithm.
    """

    players: Tuple[PlayerName, ...]

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[PlayerName]:
        return iter(self.players)

    def __contains__(self, name: object) -> bool:
        return name in self.players

    @property
    def is_odd(self) -> bool:
        """True when one player has to sit out every round."""
        return len(self.players) % 2 == 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize roster to dictionary."""
        return {"players": list(self.players)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Roster":
        """Deserialize (and re-validate) a roster from dictionary."""
        return build_roster(data.get("players", []))


def normalize_player_name(name: Any) -> PlayerName:
    """Trim a raw player name and check it is usable.

    Raises:
        InvalidPlayerNameException: If the name is not a string, is blank,
            holds control characters or is the reserved bye marker
    """
    if not isinstance(name, str):
        raise InvalidPlayerNameException(
            f"Player names must be strings, got {type(name).__name__}"
        )
    trimmed = name.strip()
    if not trimmed:
        raise InvalidPlayerNameException("Player names cannot be empty")
    if ILLEGAL_CHARACTERS_RE.search(trimmed):
        raise InvalidPlayerNameException(
            f"Player name {trimmed!r} contains control characters"
        )
    if trimmed == BYE_MARKER:
        raise InvalidPlayerNameException(
            f"'{BYE_MARKER}' is reserved and cannot be used as a player name"
        )
    return trimmed


def build_roster(names: Iterable[Any]) -> Roster:
    """Build a roster from raw player names.

    Names are trimmed and compared case-sensitively. Input order is kept.

    Args:
        names: Player names as entered by the user

    Returns:
        The validated roster

    Raises:
        EmptyRosterException: If no names were given
        InvalidPlayerNameException: If any name is blank or reserved
        DuplicatePlayerException: If two names are identical after trimming
    """
    if names is None:
        raise EmptyRosterException("Player names list cannot be empty")

    players = []
    seen = set()
    for raw in names:
        name = normalize_player_name(raw)
        if name in seen:
            raise DuplicatePlayerException(f"Duplicate player name: '{name}'")
        seen.add(name)
        players.append(name)

    if not players:
        raise EmptyRosterException("Player names list cannot be empty")

    return Roster(players=tuple(players))

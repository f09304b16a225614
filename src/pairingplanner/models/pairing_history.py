"""Pairing history data model."""

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

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from pairingplanner.models.schedule import Schedule
from pairingplanner.type_hints import PairKey, PlayerName


@dataclass
class PairingHistory:
    """
    Counts how often every unordered pair of players has been matched.

    Attributes
    ----------
    frequencies : Counter of frozenset of str
        Occurrences of each pair across the recorded rounds.
    first_seen : dict of frozenset to int
        Round number in which each pair first met; used for stable ordering.
    """

    frequencies: Counter = field(default_factory=Counter)
    first_seen: Dict[PairKey, int] = field(default_factory=dict)

    @classmethod
    def from_schedule(cls, schedule: Schedule) -> "PairingHistory":
        """Record every pairing of ``schedule``."""
        history = cls()
        for round_data in schedule.rounds:
            for pairing in round_data.pairings:
                history.add_pairing(
                    pairing.player_a, pairing.player_b, round_data.round_number
                )
        return history

    def add_pairing(
        self, player1: PlayerName, player2: PlayerName, round_number: int = 0
    ) -> None:
        """Record that two players have been paired."""
        key = frozenset({player1, player2})
        self.frequencies[key] += 1
        self.first_seen.setdefault(key, round_number)

    def have_played(self, player1: PlayerName, player2: PlayerName) -> bool:
        """Check if two players have previously played each other."""
        return self.frequency(player1, player2) > 0

    def frequency(self, player1: PlayerName, player2: PlayerName) -> int:
        return self.frequencies.get(frozenset({player1, player2}), 0)

    @property
    def unique_pairs(self) -> int:
        return len(self.frequencies)

    @property
    def repeated_pairs(self) -> int:
        """Number of distinct pairs that met in more than one round."""
        return sum(1 for count in self.frequencies.values() if count >= 2)

    def sorted_by_frequency(self) -> List[Tuple[PairKey, int]]:
        """Pairs ordered by frequency (most frequent first), then first meeting."""
        return sorted(
            self.frequencies.items(),
            key=lambda item: (-item[1], self.first_seen[item[0]]),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "frequencies": [
                {"players": sorted(pair), "frequency": count}
                for pair, count in self.sorted_by_frequency()
            ]
        }

"""Aggregate statistics over a generated schedule.

The figures describe fairness of a schedule: how many pairings and byes it
holds, how many opponent pairs meet more than once, and how far apart the
busiest and the least busy player are.
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

import statistics
from dataclasses import dataclass
from typing import Dict, List, Union

from pairingplanner.analysis.usage import compute_usage
from pairingplanner.models.pairing_history import PairingHistory
from pairingplanner.models.schedule import Schedule
from pairingplanner.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class ScheduleStatistics:
    """Summary metrics for a schedule."""

    total_pairings: int = 0
    total_byes: int = 0
    repeated_pairs: int = 0
    balance_spread: int = 0

    # Shape of the schedule
    total_rounds: int = 0
    player_count: int = 0
    cycle_length: int = 0

    # Per-player participation
    max_appearances: int = 0
    min_appearances: int = 0

    # Pair frequency distribution
    unique_pairings: int = 0
    max_pair_frequency: int = 0
    min_pair_frequency: int = 0
    avg_pair_frequency: float = 0.0

    def to_dict(self) -> Dict[str, Union[int, float]]:
        """Convert to dictionary for serialization."""
        return {
            "totalPairings": self.total_pairings,
            "totalByes": self.total_byes,
            "repeatedPairs": self.repeated_pairs,
            "balanceSpread": self.balance_spread,
            "totalRounds": self.total_rounds,
            "playerCount": self.player_count,
            "cycleLength": self.cycle_length,
            "maxAppearances": self.max_appearances,
            "minAppearances": self.min_appearances,
            "uniquePairings": self.unique_pairings,
            "maxPairFrequency": self.max_pair_frequency,
            "minPairFrequency": self.min_pair_frequency,
            "avgPairFrequency": self.avg_pair_frequency,
        }


@dataclass(frozen=True)
class PairingFrequency:
    """How often one unordered pair of players meets."""

    players: tuple
    frequency: int

    def to_dict(self) -> Dict:
        return {"players": list(self.players), "frequency": self.frequency}


def compute_statistics(schedule: Schedule) -> ScheduleStatistics:
    """Derive the summary statistics of ``schedule``.

    Args:
        schedule: Schedule to analyze

    Returns:
        Fully populated statistics
    """
    usage = compute_usage(schedule)
    history = PairingHistory.from_schedule(schedule)

    summary = ScheduleStatistics(
        total_rounds=schedule.number_of_rounds,
        player_count=len(schedule.roster),
        cycle_length=schedule.cycle_length,
    )
    summary.total_pairings = sum(len(r.pairings) for r in schedule.rounds)
    summary.total_byes = sum(1 for r in schedule.rounds if r.bye_player is not None)
    summary.repeated_pairs = history.repeated_pairs

    appearances = [record.appearances for record in usage.values()]
    summary.max_appearances = max(appearances)
    summary.min_appearances = min(appearances)
    summary.balance_spread = summary.max_appearances - summary.min_appearances

    frequencies = list(history.frequencies.values())
    summary.unique_pairings = history.unique_pairs
    if frequencies:
        summary.max_pair_frequency = max(frequencies)
        summary.min_pair_frequency = min(frequencies)
        summary.avg_pair_frequency = float(statistics.mean(frequencies))

    logger.debug(
        "Statistics: %d pairings, %d byes, %d repeated pairs, spread %d",
        summary.total_pairings,
        summary.total_byes,
        summary.repeated_pairs,
        summary.balance_spread,
    )
    return summary


def pairing_frequencies(schedule: Schedule) -> List[PairingFrequency]:
    """List every pair that meets, most frequent first.

    Ties keep the order in which the pairs first met. Within a pair the
    players are listed in roster order.
    """
    position = {player: idx for idx, player in enumerate(schedule.players)}
    history = PairingHistory.from_schedule(schedule)
    return [
        PairingFrequency(
            players=tuple(sorted(pair, key=position.__getitem__)),
            frequency=count,
        )
        for pair, count in history.sorted_by_frequency()
    ]

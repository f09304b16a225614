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

"""
Round Robin Schedule Generator

This module implements the circle (rotation) method for round-robin
schedules. Players are seated around a circle in roster order; seat 0 stays
put while the other seats rotate by one position per round, and each seat is
paired with its mirror across the circle.

- An even roster of M players meets every opponent once in M-1 rounds
- An odd roster gets a virtual ghost seat; whoever faces the ghost has the bye,
  so every player sits out exactly once in the M-round cycle
- Requests longer than the natural cycle wrap around and replay the whole
  cycle before any round repeats a second time

Example:
    >>> from pairingplanner.models import build_roster
    >>> roster = build_roster(["Alice", "Bob", "Charlie", "David"])
    >>> schedule = generate_schedule(roster, 3)
    >>> schedule.rounds[0].pairings[0]
    Pairing(player_a='Alice', player_b='David')
"""

from datetime import date
from typing import List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from pairingplanner.constants import DEFAULT_ROUND_INTERVAL_DAYS
from pairingplanner.exceptions import (
    InvalidRoundCountException,
    ScheduleInvariantException,
)
from pairingplanner.models.roster import Roster
from pairingplanner.models.schedule import Pairing, RoundData, Schedule
from pairingplanner.type_hints import MaybePlayer, PlayerName, RoundSeats
from pairingplanner.utils import setup_logger

logger = setup_logger(__name__)

# Type aliases for clarity
CircleTable = Tuple[RoundSeats, ...]  # One natural cycle of seat pairings
RoundPairings = Tuple[Tuple[Pairing, ...], MaybePlayer]


def seat_count(n_players: int) -> int:
    """Number of seats around the circle, ghost seat included."""
    return n_players + 1 if n_players % 2 else n_players


def cycle_length(n_players: int) -> int:
    """Rounds in the natural cycle: M-1 for even rosters, M for odd ones."""
    if n_players < 1:
        raise ValueError("A round robin needs at least one player")
    return seat_count(n_players) - 1


def build_circle_table(n_seats: int) -> CircleTable:
    """
    Build the seat pairings of one natural cycle.

    Args:
        n_seats: Even number of seats (ghost seat included)

    Returns:
        One tuple of (seat, mirrored seat) pairs per round
    """
    if n_seats < 2 or n_seats % 2:
        raise ValueError(f"Circle needs an even number of seats, got {n_seats}")

    fixed, rotating = 0, list(range(1, n_seats))
    table = []
    for round_idx in range(n_seats - 1):
        cut = len(rotating) - round_idx
        circle = [fixed] + rotating[cut:] + rotating[:cut]
        table.append(
            tuple((circle[i], circle[n_seats - 1 - i]) for i in range(n_seats // 2))
        )
    return tuple(table)


class RoundRobin:
    """
    A round-robin pairing cycle for a fixed roster.

    The full natural cycle is computed once; ``get_round_pairings`` maps any
    requested round onto it, wrapping around once the cycle is exhausted.

    Attributes:
        roster: The roster in seating order
        circle_table: Seat pairings of the natural cycle
        number_of_rounds: Length of the natural cycle
        ghost_seat: Seat index of the virtual ghost (None for even rosters)
        round_pairings: Player pairings for each round of the cycle

    Example:
        >>> rr = RoundRobin(build_roster(["Alice", "Bob", "Charlie"]))
        >>> rr.number_of_rounds
        3
        >>> rr.get_round_pairings(4) == rr.get_round_pairings(1)
        True
    """

    def __init__(self, roster: Roster) -> None:
        self.roster = roster
        self.players: Tuple[PlayerName, ...] = roster.players
        n_players = len(self.players)

        self.ghost_seat: Optional[int] = n_players if n_players % 2 else None
        self.circle_table = build_circle_table(seat_count(n_players))
        self.number_of_rounds = len(self.circle_table)

        self._generate_all_pairings()

    def _generate_all_pairings(self) -> None:
        """Generate pairings for every round of the natural cycle."""
        self.round_pairings: List[RoundPairings] = [
            self._generate_round_pairings(round_idx)
            for round_idx in range(self.number_of_rounds)
        ]
        logger.debug(
            "Generated %d cycle rounds for %d players",
            self.number_of_rounds,
            len(self.players),
        )

    def _generate_round_pairings(self, round_idx: int) -> RoundPairings:
        """
        Turn the seat pairings of one cycle round into player pairings.

        Args:
            round_idx: 0-indexed round of the natural cycle

        Returns:
            Tuple of (pairings, bye_player)
        """
        matches = []
        bye_player = None

        for seat_a, seat_b in self.circle_table[round_idx]:
            if self.ghost_seat in (seat_a, seat_b):
                real_seat = seat_b if seat_a == self.ghost_seat else seat_a
                bye_player = self.players[real_seat]
                continue
            low, high = sorted((seat_a, seat_b))
            matches.append(Pairing(self.players[low], self.players[high]))

        return tuple(matches), bye_player

    def cycle_round_for(self, round_number: int) -> int:
        """Map a requested 1-indexed round onto its 1-indexed cycle round."""
        return (round_number - 1) % self.number_of_rounds + 1

    def get_round_pairings(self, round_number: int) -> RoundPairings:
        """
        Get pairings for a specific round.

        Args:
            round_number: 1-indexed round number, may exceed the cycle length

        Returns:
            Pairings for the specified round

        Raises:
            InvalidRoundCountException: If round_number is below 1
        """
        if round_number < 1:
            raise InvalidRoundCountException(
                f"Round {round_number} is not valid, rounds start at 1"
            )
        return self.round_pairings[self.cycle_round_for(round_number) - 1]

    def __repr__(self) -> str:
        return (
            f"RoundRobin(players={len(self.players)}, "
            f"cycle={self.number_of_rounds}, "
            f"ghost_seat={self.ghost_seat})"
        )


def validate_round_count(rounds: object) -> int:
    """Check that ``rounds`` is a positive integer and return it.

    Raises:
        InvalidRoundCountException: For booleans, non-integers and values below 1
    """
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise InvalidRoundCountException(
            f"Number of rounds must be an integer, got {rounds!r}"
        )
    if rounds < 1:
        raise InvalidRoundCountException(
            f"Number of rounds must be greater than 0, got {rounds}"
        )
    return rounds


def check_round(round_data: RoundData, roster: Roster) -> None:
    """
    Verify that every roster player occupies exactly one slot in the round.

    Raises:
        ScheduleInvariantException: If a player is missing, doubled or unknown
    """
    slotted = list(round_data.players())
    expected_byes = 1 if roster.is_odd else 0
    actual_byes = 0 if round_data.bye_player is None else 1

    if (
        len(slotted) != len(set(slotted))
        or set(slotted) != set(roster.players)
        or actual_byes != expected_byes
    ):
        logger.error(
            "Round %d breaks the one-slot-per-player rule: %s",
            round_data.round_number,
            slotted,
        )
        raise ScheduleInvariantException(
            f"Round {round_data.round_number} does not seat every player exactly once"
        )


def generate_schedule(
    roster: Roster,
    rounds: int,
    start_date: Optional[date] = None,
    interval_days: int = DEFAULT_ROUND_INTERVAL_DAYS,
) -> Schedule:
    """
    Generate a complete, validated round-robin schedule.

    Args:
        roster: Validated roster; its order seeds the seating
        rounds: Number of rounds to emit (at least 1)
        start_date: Optional date of round one; later rounds follow every
            ``interval_days`` days
        interval_days: Days between dated rounds

    Returns:
        The immutable schedule

    Raises:
        InvalidRoundCountException: If rounds is not a positive integer
        ScheduleInvariantException: If a generated round is inconsistent
    """
    rounds = validate_round_count(rounds)
    round_robin = RoundRobin(roster)

    logger.info(
        "Generating schedule: %d players, %d rounds (cycle length %d)",
        len(roster),
        rounds,
        round_robin.number_of_rounds,
    )
    if rounds > round_robin.number_of_rounds:
        logger.info(
            "Requested rounds exceed the natural cycle of %d, pairings will repeat",
            round_robin.number_of_rounds,
        )

    round_list = []
    for round_number in range(1, rounds + 1):
        pairings, bye_player = round_robin.get_round_pairings(round_number)
        round_date = None
        if start_date is not None:
            round_date = start_date + relativedelta(
                days=interval_days * (round_number - 1)
            )
        round_data = RoundData(
            round_number=round_number,
            pairings=pairings,
            bye_player=bye_player,
            round_date=round_date,
        )
        check_round(round_data, roster)
        round_list.append(round_data)
        logger.debug(
            "Round %d: %s, bye: %s",
            round_number,
            ", ".join(str(p) for p in pairings),
            bye_player,
        )

    return Schedule(
        roster=roster,
        rounds=tuple(round_list),
        cycle_length=round_robin.number_of_rounds,
        start_date=start_date,
        interval_days=interval_days,
    )


#  LocalWords:  CircleTable RoundSeats RoundRobin

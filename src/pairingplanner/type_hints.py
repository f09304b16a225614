"""Type hints used in Pairing Planner."""

from typing import Optional, Tuple

# A player is identified by its (trimmed, case-preserved) name
PlayerName = str
MaybePlayer = Optional[PlayerName]

# Export format literals
# Tuple of seat indices facing each other in one round
SeatPairing = Tuple[int, int]
# All seat pairings for one round of the natural cycle
RoundSeats = Tuple[SeatPairing, ...]
# An unordered pair of players, used as a history key
PairKey = frozenset

#  LocalWords:  SeatPairing RoundSeats PairKey

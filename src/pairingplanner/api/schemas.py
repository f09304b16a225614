"""Request schemas for the HTTP API.

Field names follow the camelCase used by the browser UI; Python attributes
stay snake_case.
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
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Body of ``POST /planer/generate``."""

    model_config = ConfigDict(populate_by_name=True)

    player_names: List[str] = Field(
        alias="playerNames",
        description="Player names in seating order; trimmed, must be unique.",
    )
    number_of_rounds: int = Field(
        alias="numberOfRounds",
        description="Rounds to schedule; rounds past the natural cycle repeat it.",
    )
    start_date: Optional[date] = Field(
        default=None,
        alias="startDate",
        description="Optional date of round one (ISO 8601).",
    )


class ErrorResponse(BaseModel):
    """Error payload returned for every handled failure."""

    error: str
    type: str
    reason: str
    timestamp: int

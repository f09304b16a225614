"""Schedule planning API routes.

Responsibilities:
- schedule generation (``/generate``)
- read-side views of the current schedule (``/pairings``, ``/player-usage``,
  ``/statistics``, ``/pairing-frequencies``, ``/players/{name}/schedule``)
- tabular export (``/download``)
- health check (``/health``)
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

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response

from pairingplanner.api.schemas import GenerateRequest
from pairingplanner.constants import API_PREFIX
from pairingplanner.controllers.planner import SchedulePlanner
from pairingplanner.utils import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix=API_PREFIX, tags=["Schedule Planning"])


def get_planner(request: Request) -> SchedulePlanner:
    """Planner owned by the running application."""
    return request.app.state.planner


@router.get("/health")
def health():
    """Health check endpoint.

    Returns:
        dict: ``{"status": "OK"}``
    """
    return {"status": "OK"}


@router.post("/generate")
def generate(body: GenerateRequest, planner: SchedulePlanner = Depends(get_planner)):
    """Generate a schedule and make it the current one.

    Returns the full schedule: players, round count, cycle length and every
    round with its pairings and bye.
    """
    schedule = planner.generate(
        body.player_names, body.number_of_rounds, start_date=body.start_date
    )
    return schedule.to_dict()


@router.get("/pairings")
def pairings(planner: SchedulePlanner = Depends(get_planner)):
    """Rounds of the current schedule: ``[{round, pairings, bye}]``."""
    logger.info("Retrieving all pairings")
    return [round_data.to_dict() for round_data in planner.pairings().rounds]


@router.get("/player-usage")
def player_usage(planner: SchedulePlanner = Depends(get_planner)):
    """Appearances and byes per player, in roster order."""
    logger.info("Retrieving player usage statistics")
    return {name: record.to_dict() for name, record in planner.player_usage().items()}


@router.get("/statistics")
def statistics(planner: SchedulePlanner = Depends(get_planner)):
    logger.info("Retrieving schedule statistics")
    return planner.statistics().to_dict()


@router.get("/pairing-frequencies")
def pairing_frequencies(planner: SchedulePlanner = Depends(get_planner)):
    """Every pair that meets, most frequent first."""
    return [entry.to_dict() for entry in planner.pairing_frequencies()]


@router.get("/players/{name}/schedule")
def player_schedule(name: str, planner: SchedulePlanner = Depends(get_planner)):
    """Opponent of one player in every round (``null`` for a bye)."""
    return [entry.to_dict() for entry in planner.player_schedule(name)]


@router.get("/download")
def download(
    fmt: Optional[str] = Query(
        default=None,
        alias="format",
        description="Export format: csv (Excel-compatible) or xlsx.",
    ),
    planner: SchedulePlanner = Depends(get_planner),
):
    """Download the current schedule as a file attachment."""
    export = planner.download(fmt)
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": export.content_disposition},
    )

"""Exception handlers translating planner errors into HTTP responses."""

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

import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pairingplanner.api.schemas import ErrorResponse
from pairingplanner.exceptions import (
    PairingPlannerException,
    PlayerNotFoundException,
    ScheduleInvariantException,
    ScheduleNotFoundException,
    ValidationException,
)
from pairingplanner.utils import setup_logger

logger = setup_logger(__name__)


def _error_response(status_code: int, message: str, exc_type: str, reason: str):
    payload = ErrorResponse(
        error=message,
        type=exc_type,
        reason=reason,
        timestamp=int(time.time() * 1000),
    )
    return JSONResponse(status_code=status_code, content=payload.model_dump())


async def validation_exception_handler(request: Request, exc: ValidationException):
    logger.warning("Rejected request to %s: %s", request.url.path, exc)
    return _error_response(
        status.HTTP_400_BAD_REQUEST, str(exc), type(exc).__name__, exc.reason
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    messages = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.warning("Malformed request to %s: %s", request.url.path, messages)
    return _error_response(
        status.HTTP_400_BAD_REQUEST, messages, "RequestValidationError", "BadRequest"
    )


async def not_found_handler(request: Request, exc: PairingPlannerException):
    logger.info("%s: %s", request.url.path, exc)
    return _error_response(
        status.HTTP_404_NOT_FOUND, str(exc), type(exc).__name__, exc.reason
    )


async def planner_exception_handler(request: Request, exc: PairingPlannerException):
    logger.error("Error handling %s: %s", request.url.path, exc, exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc),
        type(exc).__name__,
        exc.reason,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every planner exception handler to ``app``."""
    app.add_exception_handler(ValidationException, validation_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ScheduleNotFoundException, not_found_handler)
    app.add_exception_handler(PlayerNotFoundException, not_found_handler)
    app.add_exception_handler(ScheduleInvariantException, planner_exception_handler)
    app.add_exception_handler(PairingPlannerException, planner_exception_handler)

"""FastAPI application factory.

The application serves the endpoints the planner's browser UI calls. Each
application instance owns its own ``SchedulePlanner`` (and therefore its own
schedule store), so separate instances never share a schedule.
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

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pairingplanner import __version__
from pairingplanner.api.errors import register_exception_handlers
from pairingplanner.api.routes import router
from pairingplanner.config import PlannerSettings
from pairingplanner.constants import APP_NAME
from pairingplanner.controllers.planner import SchedulePlanner
from pairingplanner.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


def create_app(
    settings: Optional[PlannerSettings] = None,
    planner: Optional[SchedulePlanner] = None,
) -> FastAPI:
    """Build the HTTP application.

    Args:
        settings: Runtime settings, read from the environment when omitted
        planner: Planner to serve; a new one bound to ``settings`` by default

    Returns:
        Configured FastAPI application
    """
    settings = settings if settings is not None else PlannerSettings.from_env()
    set_log_level(settings.log_level)
    planner = planner if planner is not None else SchedulePlanner(settings=settings)

    app = FastAPI(title=f"{APP_NAME} API", version=__version__)
    app.state.settings = settings
    app.state.planner = planner

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(router)

    logger.info("API ready under %s", router.prefix)
    return app

"""PlannerSettings data class."""

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

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pairingplanner.constants import (
    DEFAULT_EXPORT_FORMAT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_ROUND_INTERVAL_DAYS,
    ENV_PREFIX,
    EXPORT_FORMATS,
)
from pairingplanner.exceptions import InvalidConfigurationException


@dataclass
class PlannerSettings:
    """Runtime settings for the planner service and its transports.

    Attributes
    ----------
    host : str
        Interface the HTTP server binds to.
    port : int
        Port the HTTP server listens on.
    log_level : str
        Name of the level applied to the package logger.
    export_format : str
        Format used by ``download`` when the caller does not pick one.
    export_dir : Path or None
        When set, every download is also written into this directory.
    round_interval_days : int
        Days between two dated rounds.
    cors_origins : list of str
        Browser origins allowed to call the API.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    export_format: str = DEFAULT_EXPORT_FORMAT
    export_dir: Optional[Path] = None
    round_interval_days: int = DEFAULT_ROUND_INTERVAL_DAYS
    cors_origins: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidConfigurationException(f"Unknown log level: {self.log_level}")
        if self.export_format not in EXPORT_FORMATS:
            raise InvalidConfigurationException(
                f"Unsupported export format '{self.export_format}', "
                f"expected one of {', '.join(EXPORT_FORMATS)}"
            )
        if not 0 < self.port < 65536:
            raise InvalidConfigurationException(f"Invalid port: {self.port}")
        if self.round_interval_days < 1:
            raise InvalidConfigurationException(
                "Round interval must be at least one day"
            )
        if self.export_dir is not None:
            self.export_dir = Path(self.export_dir)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "export_format": self.export_format,
            "export_dir": str(self.export_dir) if self.export_dir else None,
            "round_interval_days": self.round_interval_days,
            "cors_origins": list(self.cors_origins),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlannerSettings":
        """Deserialize settings from dictionary."""
        export_dir = data.get("export_dir")
        return cls(
            host=data.get("host", DEFAULT_HOST),
            port=int(data.get("port", DEFAULT_PORT)),
            log_level=data.get("log_level", "INFO"),
            export_format=data.get("export_format", DEFAULT_EXPORT_FORMAT),
            export_dir=Path(export_dir) if export_dir else None,
            round_interval_days=int(
                data.get("round_interval_days", DEFAULT_ROUND_INTERVAL_DAYS)
            ),
            cors_origins=list(data.get("cors_origins", [])),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PlannerSettings":
        """Build settings from ``PAIRING_PLANNER_*`` environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            Settings with every unset variable left at its default

        Raises:
            InvalidConfigurationException: If a numeric variable does not parse
        """
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}
        for key in (
            "host",
            "port",
            "log_level",
            "export_format",
            "export_dir",
            "round_interval_days",
        ):
            value = environ.get(ENV_PREFIX + key.upper())
            if value is not None and value.strip():
                data[key] = value.strip()

        origins = environ.get(ENV_PREFIX + "CORS_ORIGINS", "")
        data["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        try:
            return cls.from_dict(data)
        except ValueError as e:
            raise InvalidConfigurationException(f"Invalid environment setting: {e}")

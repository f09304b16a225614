"""Tabular export of schedules (CSV and Excel workbook)."""

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
from pathlib import Path

from pairingplanner.constants import (
    EXPORT_CSV,
    EXPORT_FORMATS,
    EXPORT_MEDIA_TYPES,
    EXPORT_XLSX,
)
from pairingplanner.exceptions import InvalidExportFormatException
from pairingplanner.export.csv_export import parse_csv, render_csv
from pairingplanner.export.table import ExportRow, schedule_rows
from pairingplanner.export.xlsx_export import parse_xlsx, render_xlsx
from pairingplanner.models.schedule import Schedule
from pairingplanner.utils import setup_logger

logger = setup_logger(__name__)

_RENDERERS = {
    EXPORT_CSV: render_csv,
    EXPORT_XLSX: render_xlsx,
}


@dataclass(frozen=True)
class ExportFile:
    """A rendered schedule ready to be sent or saved."""

    filename: str
    content: bytes
    media_type: str

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'

    def save(self, directory: Path) -> Path:
        """Write the file into ``directory`` (created if needed)."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.content)
        logger.info("Export saved to: %s", path)
        return path


def export_filename(schedule: Schedule, fmt: str) -> str:
    """Deterministic file name, e.g. ``schedule-10p-9r.csv``."""
    return f"schedule-{len(schedule.roster)}p-{schedule.number_of_rounds}r.{fmt}"


def export_schedule(schedule: Schedule, fmt: str = EXPORT_CSV) -> ExportFile:
    """Render ``schedule`` in the requested format.

    Args:
        schedule: Schedule to export
        fmt: ``csv`` or ``xlsx`` (case-insensitive)

    Returns:
        The rendered file with its suggested name and media type

    Raises:
        InvalidExportFormatException: If the format is not supported
    """
    fmt = (fmt or EXPORT_CSV).strip().lower()
    if fmt not in EXPORT_FORMATS:
        raise InvalidExportFormatException(
            f"Unsupported export format '{fmt}', expected one of "
            f"{', '.join(EXPORT_FORMATS)}"
        )

    content = _RENDERERS[fmt](schedule)
    logger.info(
        "Exported %d rounds as %s (%d bytes)",
        schedule.number_of_rounds,
        fmt,
        len(content),
    )
    return ExportFile(
        filename=export_filename(schedule, fmt),
        content=content,
        media_type=EXPORT_MEDIA_TYPES[fmt],
    )


__all__ = [
    "ExportFile",
    "ExportRow",
    "export_filename",
    "export_schedule",
    "parse_csv",
    "parse_xlsx",
    "render_csv",
    "render_xlsx",
    "schedule_rows",
]

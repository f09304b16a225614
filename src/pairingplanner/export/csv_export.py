"""Excel-compatible CSV rendering and parsing of schedules."""

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

import csv
import io
from typing import List, Union

from dateutil.parser import isoparse

from pairingplanner.constants import COL_DATE, COL_PLAYER_A, COL_PLAYER_B, COL_ROUND
from pairingplanner.export.table import ExportRow, header, row_values, schedule_rows
from pairingplanner.models.schedule import Schedule

# Excel only detects UTF-8 when the file starts with a byte order mark
CSV_ENCODING = "utf-8-sig"

# Spreadsheets evaluate cells starting with these as formulas
FORMULA_PREFIXES = ("=", "+", "-", "@")
TEXT_PREFIX = "'"


def escape_cell(value):
    """Prefix text that a spreadsheet would read as a formula.

    Text that already starts with the prefix is escaped as well, so
    :func:`unescape_cell` can always strip exactly one prefix.
    """
    if isinstance(value, str) and value.startswith(FORMULA_PREFIXES + (TEXT_PREFIX,)):
        return TEXT_PREFIX + value
    return value


def unescape_cell(value: str) -> str:
    return value[1:] if value.startswith(TEXT_PREFIX) else value


def render_csv(schedule: Schedule) -> bytes:
    """Render ``schedule`` as CSV bytes, one row per pairing or bye."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n")
    writer.writerow(header(schedule.is_dated))
    for row in schedule_rows(schedule):
        writer.writerow(
            [escape_cell(value) for value in row_values(row, schedule.is_dated)]
        )
    return buffer.getvalue().encode(CSV_ENCODING)


def parse_csv(data: Union[bytes, str]) -> List[ExportRow]:
    """Parse CSV produced by :func:`render_csv` back into rows.

    Raises:
        ValueError: If a required column is missing or a value does not parse
    """
    text = data.decode(CSV_ENCODING) if isinstance(data, bytes) else data
    reader = csv.DictReader(io.StringIO(text))

    missing = {COL_ROUND, COL_PLAYER_A, COL_PLAYER_B} - set(reader.fieldnames or [])
    if missing:
        raise ValueError(f"CSV is missing columns: {', '.join(sorted(missing))}")

    rows = []
    for record in reader:
        date_value = (record.get(COL_DATE) or "").strip()
        rows.append(
            ExportRow(
                round_number=int(record[COL_ROUND]),
                player_a=unescape_cell(record[COL_PLAYER_A]),
                player_b=unescape_cell(record[COL_PLAYER_B]),
                round_date=isoparse(date_value).date() if date_value else None,
            )
        )
    return rows

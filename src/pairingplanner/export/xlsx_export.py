"""Excel workbook rendering of schedules."""

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

from datetime import date, datetime
from io import BytesIO
from typing import List

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from pairingplanner.constants import (
    COL_DATE,
    COL_PLAYER_A,
    COL_PLAYER_B,
    COL_ROUND,
    XLSX_SHEET_TITLE,
)
from pairingplanner.export.table import ExportRow, header, schedule_rows
from pairingplanner.models.schedule import Schedule


def render_xlsx(schedule: Schedule) -> bytes:
    """Render ``schedule`` as an .xlsx workbook with a single sheet."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = XLSX_SHEET_TITLE

    columns = header(schedule.is_dated)
    ws.append(columns)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for row in schedule_rows(schedule):
        if schedule.is_dated:
            ws.append([row.round_number, row.round_date, row.player_a, row.player_b])
        else:
            ws.append([row.round_number, row.player_a, row.player_b])
        # Player names are text, never formulas
        for cell in ws[ws.max_row][-2:]:
            cell.data_type = "s"

    if schedule.is_dated:
        for (cell,) in ws.iter_rows(min_row=2, min_col=2, max_col=2):
            cell.number_format = "yyyy-mm-dd"

    for idx, name in enumerate(columns, start=1):
        letter = get_column_letter(idx)
        width = max([len(name)] + [len(str(c.value or "")) for c in ws[letter]])
        ws.column_dimensions[letter].width = width + 2
    ws.freeze_panes = "A2"

    with BytesIO() as bio:
        wb.save(bio)
        return bio.getvalue()


def parse_xlsx(data: bytes) -> List[ExportRow]:
    """Read rows back from a workbook produced by :func:`render_xlsx`."""
    wb = openpyxl.load_workbook(BytesIO(data), read_only=True)
    ws = wb[XLSX_SHEET_TITLE]
    values = list(ws.iter_rows(values_only=True))
    wb.close()
    if not values:
        return []

    index = {name: pos for pos, name in enumerate(values[0])}
    rows = []
    for record in values[1:]:
        raw_date = record[index[COL_DATE]] if COL_DATE in index else None
        if isinstance(raw_date, datetime):
            raw_date = raw_date.date()
        rows.append(
            ExportRow(
                round_number=int(record[index[COL_ROUND]]),
                player_a=str(record[index[COL_PLAYER_A]]),
                player_b=str(record[index[COL_PLAYER_B]]),
                round_date=raw_date if isinstance(raw_date, date) else None,
            )
        )
    return rows

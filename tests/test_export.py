from datetime import date
from io import BytesIO

import openpyxl
import pytest

from pairingplanner.exceptions import InvalidExportFormatException
from pairingplanner.export import (
    export_filename,
    export_schedule,
    parse_csv,
    parse_xlsx,
    render_csv,
    schedule_rows,
)
from pairingplanner.models import build_roster
from pairingplanner.pairing import generate_schedule


def _schedule(names, rounds, **kwargs):
    return generate_schedule(build_roster(names), rounds, **kwargs)


def _round_tuples(schedule):
    tuples = []
    for round_data in schedule.rounds:
        for pairing in round_data.pairings:
            tuples.append((round_data.round_number, pairing.player_a, pairing.player_b))
        if round_data.bye_player is not None:
            tuples.append((round_data.round_number, round_data.bye_player, "BYE"))
    return tuples


def test_csv_has_header_and_one_row_per_pairing():
    schedule = _schedule(["A", "B", "C", "D"], 3)
    text = render_csv(schedule).decode("utf-8-sig")
    lines = text.split("\r\n")

    assert lines[0] == "Round,Player A,Player B"
    assert lines[1] == "1,A,D"
    assert lines[2] == "1,B,C"
    assert len([line for line in lines if line]) == 1 + 6


def test_csv_starts_with_a_byte_order_mark():
    content = render_csv(_schedule(["A", "B"], 1))
    assert content.startswith(b"\xef\xbb\xbf")


def test_csv_reads_back_the_same_rounds():
    schedule = _schedule(["Anna", "Ben", "Clara", "Dan", "Eve"], 7)
    rows = parse_csv(render_csv(schedule))

    assert [(r.round_number, r.player_a, r.player_b) for r in rows] == _round_tuples(
        schedule
    )


def test_bye_rows_come_last_in_their_round():
    schedule = _schedule(["A", "B", "C"], 3)
    rows = schedule_rows(schedule)

    by_round = {}
    for row in rows:
        by_round.setdefault(row.round_number, []).append(row)
    for round_rows in by_round.values():
        assert [row.is_bye for row in round_rows] == [False, True]


def test_names_with_commas_and_quotes_survive_csv():
    names = ['Smith, Jane', 'Ann "The Rook" Lee', "Jörg"]
    rows = parse_csv(render_csv(_schedule(names, 3)))
    players = {r.player_a for r in rows} | {r.player_b for r in rows}
    assert players == set(names) | {"BYE"}


def test_dated_csv_has_a_date_column():
    schedule = _schedule(["A", "B", "C", "D"], 2, start_date=date(2025, 3, 1))
    text = render_csv(schedule).decode("utf-8-sig")

    assert text.split("\r\n")[0] == "Round,Date,Player A,Player B"
    rows = parse_csv(text)
    assert rows[0].round_date == date(2025, 3, 1)
    assert rows[-1].round_date == date(2025, 3, 8)


def test_parse_csv_rejects_foreign_files():
    with pytest.raises(ValueError):
        parse_csv("Name,Score\r\nAnna,3\r\n")


@pytest.mark.parametrize("start_date", [None, date(2025, 1, 6)])
def test_xlsx_reads_back_the_same_rounds(start_date):
    schedule = _schedule(["A", "B", "C", "D", "E"], 6, start_date=start_date)
    export = export_schedule(schedule, "xlsx")
    rows = parse_xlsx(export.content)

    assert export.content.startswith(b"PK")
    assert [(r.round_number, r.player_a, r.player_b) for r in rows] == _round_tuples(
        schedule
    )
    assert rows[0].round_date == start_date


def test_export_file_metadata():
    schedule = _schedule(["A", "B", "C"], 4)
    export = export_schedule(schedule, "CSV")

    assert export.filename == "schedule-3p-4r.csv"
    assert export.filename == export_filename(schedule, "csv")
    assert export.media_type == "application/vnd.ms-excel"
    assert export.content_disposition == 'attachment; filename="schedule-3p-4r.csv"'


def test_unsupported_format_is_rejected():
    with pytest.raises(InvalidExportFormatException) as excinfo:
        export_schedule(_schedule(["A", "B"], 1), "pdf")
    assert excinfo.value.reason == "InvalidExportFormat"


def test_export_file_save(tmp_path):
    export = export_schedule(_schedule(["A", "B"], 2), "csv")
    path = export.save(tmp_path / "exports")

    assert path == tmp_path / "exports" / "schedule-2p-2r.csv"
    assert path.read_bytes() == export.content


FORMULA_NAMES = ["=1+1", "+Ben", "-5", "@home", "'quoted"]


def test_csv_escapes_formula_like_names():
    text = render_csv(_schedule(["=1+1", "Bob"], 1)).decode("utf-8-sig")
    assert text.split("\r\n")[1] == "1,'=1+1,Bob"


def test_formula_like_names_survive_csv():
    schedule = _schedule(FORMULA_NAMES, 5)
    rows = parse_csv(render_csv(schedule))

    assert [(r.round_number, r.player_a, r.player_b) for r in rows] == _round_tuples(
        schedule
    )


def test_xlsx_stores_formula_like_names_as_text():
    schedule = _schedule(FORMULA_NAMES, 5)
    content = export_schedule(schedule, "xlsx").content

    ws = openpyxl.load_workbook(BytesIO(content))["Schedule"]
    player_cells = [cell for row in ws.iter_rows(min_row=2, min_col=2) for cell in row]
    assert player_cells
    assert all(cell.data_type == "s" for cell in player_cells)

    rows = parse_xlsx(content)
    assert [(r.round_number, r.player_a, r.player_b) for r in rows] == _round_tuples(
        schedule
    )

"""Unit tests for the XLSX guest reader."""

from __future__ import annotations

import io

import pytest
from openpyxl import Workbook

from parasempre.adapters.guest_import import ImportParseError, parse_xlsx
from parasempre.service_layer.commands import CreateGuest

# pylint: disable=magic-value-comparison

HEADER = ["first_name", "last_name", "phone", "relationship", "family_group"]


def _workbook(*rows, extra_sheet: list | None = None) -> io.BytesIO:
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(list(row))
    if extra_sheet is not None:
        other = wb.create_sheet("other")
        other.append(extra_sheet)
    buf = io.BytesIO()
    wb.save(buf)
    buf.seek(0)
    return buf


def test_reads_first_sheet():
    """Rows of the first worksheet become commands; other sheets are ignored."""
    guests = parse_xlsx(
        _workbook(
            HEADER,
            ["Maria", "Santos", "11988888888", "R", 1],
            extra_sheet=["Ignored", "Row"],
        )
    )
    assert guests == [
        CreateGuest("Maria", "Santos", "R", phone="11988888888", family_group=1)
    ]


def test_numeric_cells_read_as_written():
    """Numbers typed into the sheet lose their float rendering."""
    (guest,) = parse_xlsx(_workbook(HEADER, ["Maria", "Santos", 11988888888, "R", 2.0]))
    assert guest.phone == "11988888888"
    assert guest.family_group == 2


def test_empty_cells_are_empty_strings():
    """Empty cells read as empty strings."""
    (guest,) = parse_xlsx(_workbook(HEADER, ["Pedro", "Santos", None, "P", 1]))
    assert guest.phone == ""


def test_blank_rows_are_skipped():
    """Rows with nothing in them produce nothing."""
    guests = parse_xlsx(
        _workbook(
            HEADER,
            [None, None, None, None, None],
            ["Maria", "Santos", None, "R", 1],
        )
    )
    assert [g.first_name for g in guests] == ["Maria"]


def test_empty_workbook():
    """A sheet without any row cannot be imported."""
    with pytest.raises(ImportParseError) as exc_info:
        parse_xlsx(_workbook())
    assert exc_info.value.message == "XLSX file is empty"


def test_missing_column():
    """Headers are checked like CSV headers."""
    with pytest.raises(ImportParseError) as exc_info:
        parse_xlsx(_workbook(HEADER[:-1], ["Maria", "Santos", None, "R"]))
    assert exc_info.value.message == "missing required column: family_group"


def test_family_group_not_a_number():
    """A non-numeric group aborts the import."""
    with pytest.raises(ImportParseError, match="must be a number, got 'um'"):
        parse_xlsx(_workbook(HEADER, ["Maria", "Santos", None, "R", "um"]))


def test_not_a_workbook():
    """Bytes that are not an XLSX file are a parse error."""
    with pytest.raises(ImportParseError, match="failed to open XLSX"):
        parse_xlsx(io.BytesIO(b"first_name,last_name\n"))

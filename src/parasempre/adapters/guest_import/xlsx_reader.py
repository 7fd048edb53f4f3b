"""XLSX guest reader (first worksheet only)."""

from __future__ import annotations

import zipfile
from typing import IO, Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from parasempre.service_layer.commands import CreateGuest

from .columns import (
    ImportParseError,
    is_blank,
    map_columns,
    required_columns,
    row_to_command,
)


def _cell_text(value: Any) -> str:
    """Render a cell value the way it reads in the sheet."""
    if value is None:
        return ""
    # numeric cells come back as floats (e.g. 3.0 or 11988888888.0)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_xlsx(stream: IO[bytes], *, require_family_group: bool = True) -> list[CreateGuest]:
    """Read guests from the first worksheet of an XLSX workbook.

    Rows too short to hold every required column, and blank rows, are
    skipped.

    Raises:
        ImportParseError: If the workbook cannot be opened, is empty, lacks
            a required column, or holds a missing or non-numeric family group.
    """
    try:
        workbook = load_workbook(stream, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        raise ImportParseError(f"failed to open XLSX: {e}") from e

    try:
        sheet = workbook.worksheets[0]
        rows = [
            [_cell_text(value) for value in row]
            for row in sheet.iter_rows(values_only=True)
        ]
    finally:
        workbook.close()

    if not rows:
        raise ImportParseError("XLSX file is empty")

    index = map_columns(rows[0], require_family_group=require_family_group)
    last_required = max(
        index[column] for column in required_columns(require_family_group)
    )

    guests = []
    for row in rows[1:]:
        if len(row) <= last_required or is_blank(row):
            continue
        guests.append(
            row_to_command(row, index, require_family_group=require_family_group)
        )
    return guests

"""CSV guest reader."""

from __future__ import annotations

import csv
from typing import TextIO

from parasempre.service_layer.commands import CreateGuest

from .columns import ImportParseError, is_blank, map_columns, row_to_command


def parse_csv(stream: TextIO, *, require_family_group: bool = True) -> list[CreateGuest]:
    """Read guests from CSV text.

    Args:
        stream: Text stream opened with ``newline=""``.
        require_family_group: If True, the ``family_group`` column and a
            value on every row are mandatory.

    Returns:
        One command per non-blank data row, in file order.

    Raises:
        ImportParseError: If the header is missing or incomplete, a row is
            malformed, or a family group is missing or not a number.
    """
    reader = csv.reader(stream)
    try:
        header = next(reader, None)
        if header is None:
            raise ImportParseError("failed to read CSV header")
        index = map_columns(header, require_family_group=require_family_group)

        return [
            row_to_command(record, index, require_family_group=require_family_group)
            for record in reader
            if not is_blank(record)
        ]
    except csv.Error as e:
        raise ImportParseError(f"failed to read CSV row: {e}") from e

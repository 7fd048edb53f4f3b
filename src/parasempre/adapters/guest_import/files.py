"""Dispatch an import file to the reader for its extension."""

from __future__ import annotations

import logging
from pathlib import Path

from parasempre.service_layer.commands import CreateGuest

from .columns import ImportParseError
from .csv_reader import parse_csv
from .xlsx_reader import parse_xlsx

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".csv", ".xlsx")


def parse_guest_file(
    path: str | Path, *, require_family_group: bool = True
) -> list[CreateGuest]:
    """Read guests from a ``.csv`` or ``.xlsx`` file.

    Raises:
        ImportParseError: If the extension is unsupported or the file cannot
            be parsed.
    """
    path = Path(path)
    ext = path.suffix.lower()
    logger.debug("Parsing guest file %s", path)

    if ext == ".csv":
        # utf-8-sig drops the BOM spreadsheet tools like to prepend
        with path.open(encoding="utf-8-sig", newline="") as stream:
            return parse_csv(stream, require_family_group=require_family_group)
    if ext == ".xlsx":
        with path.open("rb") as stream:
            return parse_xlsx(stream, require_family_group=require_family_group)

    raise ImportParseError("unsupported file format: use .csv or .xlsx")

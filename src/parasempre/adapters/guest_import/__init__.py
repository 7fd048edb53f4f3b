"""Readers turning guest spreadsheets into `CreateGuest` commands.

Supported formats are CSV and XLSX (first worksheet). The header row names
the columns (case-insensitive, surrounding blanks ignored); see
`columns.REQUIRED_COLUMNS`.
"""

from .columns import ImportParseError
from .csv_reader import parse_csv
from .files import SUPPORTED_EXTENSIONS, parse_guest_file
from .xlsx_reader import parse_xlsx

__all__ = [
    "ImportParseError",
    "SUPPORTED_EXTENSIONS",
    "parse_csv",
    "parse_guest_file",
    "parse_xlsx",
]

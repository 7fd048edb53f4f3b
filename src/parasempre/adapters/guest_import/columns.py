"""Header mapping and row decoding shared by the CSV and XLSX readers."""

from __future__ import annotations

from collections.abc import Sequence

from parasempre.domain.errors import ValidationError
from parasempre.service_layer.commands import CreateGuest

REQUIRED_COLUMNS = ("first_name", "last_name", "phone", "relationship")
FAMILY_GROUP_COLUMN = "family_group"


class ImportParseError(ValidationError):
    """Raised when an import file cannot be turned into guest inputs.

    Parse errors abort the whole import: no row is submitted.
    """

    def __init__(self, message: str) -> None:
        super().__init__("file", message)


def required_columns(require_family_group: bool) -> tuple[str, ...]:
    """Return the columns a header must contain."""
    if require_family_group:
        return (*REQUIRED_COLUMNS, FAMILY_GROUP_COLUMN)
    return REQUIRED_COLUMNS


def map_columns(
    header: Sequence[str], *, require_family_group: bool = True
) -> dict[str, int]:
    """Map normalized column names to their position in *header*.

    Raises:
        ImportParseError: If a required column is missing.
    """
    index: dict[str, int] = {}
    for position, name in enumerate(header):
        index.setdefault(name.strip().lower(), position)

    for column in required_columns(require_family_group):
        if column not in index:
            raise ImportParseError(f"missing required column: {column}")
    return index


def is_blank(cells: Sequence[str]) -> bool:
    """Return True if every cell of a row is empty or whitespace."""
    return all(not cell.strip() for cell in cells)


def parse_family_group(value: str, *, required: bool) -> int | None:
    """Decode a family-group cell.

    Raises:
        ImportParseError: If the value is missing while required, or is not
            an integer.
    """
    value = value.strip()
    if not value:
        if required:
            raise ImportParseError("invalid family_group value: family_group is required")
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ImportParseError(
            f"invalid family_group value: family_group must be a number, got {value!r}"
        ) from e


def row_to_command(
    cells: Sequence[str],
    index: dict[str, int],
    *,
    require_family_group: bool = True,
) -> CreateGuest:
    """Build a `CreateGuest` from one data row using the header index."""

    def cell(column: str) -> str:
        position = index.get(column)
        if position is None or position >= len(cells):
            return ""
        return cells[position].strip()

    family_group = None
    if FAMILY_GROUP_COLUMN in index:
        family_group = parse_family_group(
            cell(FAMILY_GROUP_COLUMN), required=require_family_group
        )
    return CreateGuest(
        first_name=cell("first_name"),
        last_name=cell("last_name"),
        phone=cell("phone"),
        relationship=cell("relationship"),
        family_group=family_group,
    )

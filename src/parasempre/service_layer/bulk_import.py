"""Bulk import of guests.

Feeds parsed `CreateGuest` commands to `GuestDirectory.create` one at a
time. Each row commits on its own: a failing row is reported and the batch
carries on, and rows already imported are never rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from parasempre.domain.errors import DomainError

from .commands import CreateGuest
from .guest_directory import GuestDirectory

logger = logging.getLogger(__name__)

#: Row number of the first data row (the header is row 1).
FIRST_DATA_ROW = 2


@dataclass(frozen=True, slots=True)
class RowFailure:
    """A row that could not be imported."""

    row: int
    message: str


@dataclass(frozen=True, slots=True)
class ImportReport:
    """Outcome of a bulk import."""

    total: int
    imported: int
    failures: tuple[RowFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """True when every row was imported."""
        return not self.failures


def import_guests(
    directory: GuestDirectory, inputs: Sequence[CreateGuest], caller: str
) -> ImportReport:
    """Create every guest in *inputs* on behalf of *caller*.

    No deduplication happens here: duplicates inside the batch are rejected
    by the directory like any other conflict.

    Returns:
        The report. Row numbers count the header as row 1.
    """
    imported = 0
    failures = []
    for row, cmd in enumerate(inputs, start=FIRST_DATA_ROW):
        try:
            directory.create(cmd, caller)
        except DomainError as e:
            logger.warning("import: row %d not imported: %s", row, e.message)
            failures.append(RowFailure(row=row, message=e.message))
            continue
        imported += 1

    logger.info("import: %d of %d guests imported", imported, len(inputs))
    return ImportReport(total=len(inputs), imported=imported, failures=tuple(failures))

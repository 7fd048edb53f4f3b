"""Rendering of domain failures on the command line.

A `DomainError` raised by a service ends the command with a red error line
on stderr and an exit status chosen by its failure kind.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any

import click

from parasempre.domain.errors import DomainError, FailureKind

from .messages import error

EXIT_CODES: dict[FailureKind, int] = {
    FailureKind.INTERNAL: 1,
    FailureKind.VALIDATION: 2,
    FailureKind.FORBIDDEN: 3,
    FailureKind.NOT_FOUND: 4,
    FailureKind.CONFLICT: 5,
}


class DomainFailure(click.ClickException):
    """Click exception carrying a domain failure and its exit status."""

    def __init__(self, failure: DomainError) -> None:
        super().__init__(failure.message)
        self.failure = failure
        self.exit_code = EXIT_CODES[failure.kind]

    def show(self, file: IO[Any] | None = None) -> None:
        field = getattr(self.failure, "field", None)
        prefix = f"{field}: " if field else ""
        error(f"{prefix}{self.format_message()}")


@contextmanager
def domain_failures() -> Iterator[None]:
    """Turn a `DomainError` raised in the block into a `DomainFailure`."""
    try:
        yield
    except DomainError as e:
        raise DomainFailure(e) from e

"""Translation of SQLAlchemy failures into storage port errors.

SQLAlchemy exceptions never leave the adapters. A unique-constraint
violation is identified by the name of the violated constraint:

    - psycopg reports it directly in ``diag.constraint_name``;
    - other Postgres drivers quote it in the message
      (``unique constraint "uq_guests_phone"``);
    - SQLite lists the constrained columns
      (``UNIQUE constraint failed: guests.phone``), which the naming
      convention in `metadata` turns back into ``uq_guests_phone``.

The offending values that Postgres echoes in its DETAIL line are never
looked at.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from parasempre.interfaces.errors import StoreError, StoreOperationError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"  # pragma: no mutate

EMPTY_STRING = ""  # pragma: no mutate

PG_UNIQUE_RE = re.compile(r'unique constraint "(?P<name>[^"]+)"')
SQLITE_UNIQUE_RE = re.compile(
    r"unique constraint failed: (?P<columns>\w+\.\w+(?:, \w+\.\w+)*)"
)

type ViolationFactory = Callable[[], StoreError]


def integrity_message(integrity_error: IntegrityError) -> str:
    """Return the lower-cased driver message carried by *integrity_error*."""
    msg = (
        str(integrity_error.orig)
        if integrity_error.orig not in (None, EMPTY_STRING)
        else str(integrity_error)
    )
    return msg.lower()


def violated_unique_constraint(integrity_error: IntegrityError) -> str | None:
    """Return the name of the unique constraint behind *integrity_error*.

    Returns:
        The constraint name (e.g. ``uq_guests_first_name_last_name``), or
        None if the failure is not a unique-constraint violation.
    """
    orig = integrity_error.orig
    diag = getattr(orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None)
    if constraint_name:
        if getattr(orig, "sqlstate", None) != UNIQUE_VIOLATION_SQLSTATE:
            return None
        return constraint_name

    msg = integrity_message(integrity_error)
    if match := PG_UNIQUE_RE.search(msg):
        return match["name"]
    if match := SQLITE_UNIQUE_RE.search(msg):
        qualified = [c.split(".") for c in match["columns"].split(", ")]
        table = qualified[0][0]
        return "_".join(["uq", table, *(column for _, column in qualified)])
    return None


def match_unique_violation(
    integrity_error: IntegrityError,
    violations: dict[str, ViolationFactory],
) -> StoreError | None:
    """Map a unique-constraint failure to a port error.

    Args:
        integrity_error: The error raised by the driver.
        violations: Constraint name to error factory.

    Returns:
        The matching error, or None if the failure is not a
        unique-constraint violation on one of the given constraints.
    """
    constraint_name = violated_unique_constraint(integrity_error)
    factory = violations.get(constraint_name or EMPTY_STRING)
    return factory() if factory is not None else None


@contextmanager
def store_operation(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure inside the block as `StoreOperationError`.

    Port errors raised inside the block propagate unchanged.
    """
    try:
        yield
    except StoreError:
        raise
    except SQLAlchemyError as e:
        logger.debug("Storage operation %s failed: %s", operation, e)
        raise StoreOperationError(operation, str(e)) from e

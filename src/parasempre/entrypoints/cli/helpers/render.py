"""Output renderers for guests, credentials and import reports.

Human output is a Rich table on stdout; ``--json`` output is one JSON
document on stdout.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import asdict
from enum import Enum
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from parasempre.interfaces.credential_store import AccessCredential, RosterEntry
    from parasempre.interfaces.guest_store import Guest

GUEST_COLUMNS = ("id", "name", "phone", "rel", "group", "confirmed")


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


def to_json(records: Iterable[Any] | Any) -> str:
    """Serialize a dataclass record, or a list of them, to JSON."""
    if isinstance(records, Iterable) and not isinstance(records, (str, bytes)):
        payload: Any = [
            {k: _jsonable(v) for k, v in asdict(r).items()} for r in records
        ]
    else:
        payload = {k: _jsonable(v) for k, v in asdict(records).items()}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def guest_table(guests: Sequence[Guest]) -> Table:
    """Build a table with one row per guest."""
    table = Table(*GUEST_COLUMNS, title=f"{len(guests)} guest(s)")
    for g in guests:
        table.add_row(
            str(g.id),
            g.full_name,
            g.phone or "",
            g.relationship.value,
            str(g.family_group),
            "yes" if g.confirmed else "no",
        )
    return table


def guest_details(guest: Guest) -> Table:
    """Build a two-column field/value table for one guest."""
    table = Table("field", "value", show_header=False)
    for key, value in asdict(guest).items():
        rendered = _jsonable(value)
        table.add_row(key, "" if rendered is None else str(rendered))
    return table


def credential_details(credential: AccessCredential) -> Table:
    """Build a field/value table for one credential."""
    table = Table("field", "value", show_header=False)
    table.add_row("code", credential.code)
    table.add_row("role", credential.role.value)
    table.add_row("guest_id", "" if credential.guest_id is None else str(credential.guest_id))
    return table


def roster_table(entries: Sequence[RosterEntry]) -> Table:
    """Build the roster table."""
    table = Table("code", "role", "name", title=f"{len(entries)} credential(s)")
    for e in entries:
        table.add_row(e.code, e.role.value, f"{e.first_name} {e.last_name}".strip())
    return table


def print_table(table: Table) -> None:
    """Print a table on stdout."""
    Console().print(table)

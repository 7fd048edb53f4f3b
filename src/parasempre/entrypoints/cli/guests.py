"""PARASEMPRE guest list commands.

Read commands (``list``, ``show``) need only a database. Commands that
change the list (``add``, ``update``, ``import``) act on behalf of an access
code given with ``--as`` or ``PARASEMPRE_CREDENTIAL``.
"""

from __future__ import annotations

from pathlib import Path

import click
import click_extra as clickx

from parasempre.bootstrap import parse_guest_file
from parasempre.interfaces.unsettable import UNSET
from parasempre.service_layer.bulk_import import import_guests
from parasempre.service_layer.commands import CreateGuest, UpdateGuest

from .app import credential_option, get_app
from .helpers import domain_failures, error, success, warn
from .helpers.render import guest_details, guest_table, print_table, to_json

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print JSON on stdout instead of a table."
)


def _unset_if_none(value):
    return UNSET if value is None else value


@click.group(cls=clickx.ExtraGroup)
def guests() -> None:
    """Manage the guest list."""


@guests.command(name="list")
@json_option
@click.pass_context
def list_guests(ctx: click.Context, as_json: bool) -> None:
    """List every guest, most recently added first."""
    app = get_app(ctx)
    with domain_failures():
        records = app.guests.list_guests()
    if as_json:
        click.echo(to_json(records))
    else:
        print_table(guest_table(records))


@guests.command()
@click.argument("guest_id", type=int)
@json_option
@click.pass_context
def show(ctx: click.Context, guest_id: int, as_json: bool) -> None:
    """Show one guest."""
    app = get_app(ctx)
    with domain_failures():
        guest = app.guests.get_by_id(guest_id)
    if as_json:
        click.echo(to_json(guest))
    else:
        print_table(guest_details(guest))


@guests.command()
@click.option("--first-name", required=True, help="Guest's first name.")
@click.option("--last-name", required=True, help="Guest's last name.")
@click.option(
    "--phone",
    default="",
    help="Mobile number: area code + 9 + 8 digits (e.g. 11912345678).",
)
@click.option(
    "--relationship",
    required=True,
    help="P (principal) or R (responsible).",
)
@click.option(
    "--family-group",
    type=int,
    default=None,
    help="Existing family group to join. Omit to open a new group.",
)
@credential_option
@json_option
@click.pass_context
def add(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    first_name: str,
    last_name: str,
    phone: str,
    relationship: str,
    family_group: int | None,
    caller: str,
    as_json: bool,
) -> None:
    """Add a guest to the list."""
    app = get_app(ctx)
    cmd = CreateGuest(
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        relationship=relationship,
        family_group=family_group,
    )
    with domain_failures():
        guest = app.guests.create(cmd, caller)
    if as_json:
        click.echo(to_json(guest))
    else:
        click.echo(guest.id)
    success(f"Guest {guest.id} added to family group {guest.family_group}.")


@guests.command()
@click.argument("guest_id", type=int)
@click.option("--first-name", default=None, help="New first name.")
@click.option("--last-name", default=None, help="New last name.")
@click.option("--phone", default=None, help="New mobile number.")
@click.option("--clear-phone", is_flag=True, help="Remove the phone number.")
@click.option("--relationship", default=None, help="P (principal) or R (responsible).")
@click.option("--family-group", type=int, default=None, help="Move to this group.")
@click.option(
    "--confirmed/--unconfirmed",
    default=None,
    help="Mark attendance as confirmed or not.",
)
@credential_option
@json_option
@click.pass_context
def update(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    guest_id: int,
    first_name: str | None,
    last_name: str | None,
    phone: str | None,
    clear_phone: bool,
    relationship: str | None,
    family_group: int | None,
    confirmed: bool | None,
    caller: str,
    as_json: bool,
) -> None:
    """Change some fields of a guest. Omitted options are left as they are."""
    if clear_phone and phone is not None:
        raise click.UsageError("--phone and --clear-phone are mutually exclusive.")

    app = get_app(ctx)
    cmd = UpdateGuest(
        first_name=_unset_if_none(first_name),
        last_name=_unset_if_none(last_name),
        phone=None if clear_phone else _unset_if_none(phone),
        relationship=_unset_if_none(relationship),
        confirmed=_unset_if_none(confirmed),
        family_group=_unset_if_none(family_group),
    )
    with domain_failures():
        guest = app.guests.update(guest_id, cmd, caller)
    if as_json:
        click.echo(to_json(guest))
    success(f"Guest {guest.id} updated.")


@guests.command()
@click.argument("guest_id", type=int)
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
def delete(ctx: click.Context, guest_id: int, assume_yes: bool) -> None:
    """Remove a guest from the list."""
    app = get_app(ctx)
    if not assume_yes:
        click.confirm(f"Delete guest {guest_id}?", abort=True)
    with domain_failures():
        app.guests.delete(guest_id)
    success(f"Guest {guest_id} deleted.")


@guests.command(name="import")
@click.argument(
    "path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--family-group/--no-family-group",
    "require_family_group",
    default=True,
    show_default=True,
    help=(
        "Require a family_group column with a value on every row. "
        "With --no-family-group, rows without a group open a new one."
    ),
)
@credential_option
@click.pass_context
def import_file(
    ctx: click.Context, path: Path, require_family_group: bool, caller: str
) -> None:
    """Add every guest listed in a .csv or .xlsx file.

    Rows are added one by one: a rejected row is reported and the rest of the
    file is still imported. Exits with status 1 if any row was rejected.
    """
    app = get_app(ctx)
    with domain_failures():
        inputs = parse_guest_file(path, require_family_group=require_family_group)
    report = import_guests(app.guests, inputs, caller)

    for failure in report.failures:
        error(f"row {failure.row}: {failure.message}")
    summary = f"Imported {report.imported} of {report.total} guests."
    if report.ok:
        success(summary)
        return
    warn(summary)
    ctx.exit(1)

"""PARASEMPRE access-code commands."""

from __future__ import annotations

import click
import click_extra as clickx

from parasempre import config
from parasempre.service_layer.commands import RegisterCredential

from .app import CREDENTIAL_ENV, get_app
from .helpers import domain_failures, success
from .helpers.render import credential_details, print_table, roster_table, to_json

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print JSON on stdout instead of a table."
)


@click.group(cls=clickx.ExtraGroup)
def users() -> None:
    """Manage access codes."""


@users.command()
@click.option("--phone", required=True, help="Phone of the guest to link.")
@click.option("--code", required=True, help="Access code to give them (5 characters).")
@click.pass_context
def register(ctx: click.Context, phone: str, code: str) -> None:
    """Give the guest owning PHONE an access code."""
    app = get_app(ctx)
    with domain_failures():
        credential = app.access.register(RegisterCredential(phone=phone, code=code))
    click.echo(credential.role.value)
    success(f"Access code {credential.code} registered.")


@users.command()
@click.argument("phone")
@click.pass_context
def check(ctx: click.Context, phone: str) -> None:
    """Tell whether the guest owning PHONE already has an access code.

    Prints the role when it does, "none" otherwise.
    """
    app = get_app(ctx)
    with domain_failures():
        result = app.access.check_by_phone(phone)
    click.echo(result.role.value if result.exists and result.role else "none")


@users.command()
@click.option(
    "--as",
    "code",
    metavar="CODE",
    envvar=CREDENTIAL_ENV,
    show_envvar=True,
    required=True,
    help="Access code to look up.",
)
@json_option
@click.pass_context
def whoami(ctx: click.Context, code: str, as_json: bool) -> None:
    """Show the account behind an access code."""
    app = get_app(ctx)
    with domain_failures():
        credential = app.access.get_by_credential(code)
    if as_json:
        click.echo(to_json(credential))
    else:
        print_table(credential_details(credential))


@users.command()
@json_option
@click.pass_context
def roster(ctx: click.Context, as_json: bool) -> None:
    """List every access code with the name of its guest."""
    app = get_app(ctx)
    with domain_failures():
        entries = app.access.list_roster()
    if as_json:
        click.echo(to_json(entries))
    else:
        print_table(roster_table(entries))


@users.command()
@click.option(
    "--groom",
    envvar=config.GROOM_CODE_ENV,
    show_envvar=True,
    default="",
    help="Access code of the groom.",
)
@click.option(
    "--bride",
    envvar=config.BRIDE_CODE_ENV,
    show_envvar=True,
    default="",
    help="Access code of the bride.",
)
@click.pass_context
def seed(ctx: click.Context, groom: str, bride: str) -> None:
    """Create the owner accounts if they are missing.

    Existing codes are never changed. Problems are logged, not raised.
    """
    app = get_app(ctx)
    app.access.seed_bootstrap(groom, bride)
    success("Owner accounts seeded.")

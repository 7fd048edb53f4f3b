"""PARASEMPRE CLI entry point.

Defines the top-level ``parasempre`` command (via Click-Extra) and registers
its command groups:

- ``parasempre db``: forward-only database management.
- ``parasempre guests``: the guest list.
- ``parasempre users``: access codes.

Examples
    $ parasempre --version
    $ parasempre db upgrade
    $ parasempre guests add --first-name Maria --last-name Santos \\
        --relationship R --as NOIVO
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from parasempre import __version__
from parasempre.logging import LoggingSettings, configure_logging, log_startup

from .db import db as db_group
from .guests import guests as guests_group
from .helpers.log_level_parser import parse_log_level
from .users import users as users_group

logger = logging.getLogger(__name__)

HELP = """PARASEMPRE command-line interface.

    Keeps the wedding guest list and the access codes allowed to change it:
    add, update and import guests, grouped by family, and link access codes
    to guests by phone number.
    """

DEFAULT_LOG_PATH = (
    Path(user_log_dir("parasempre", appauthor=False)) / "latest.log"
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Raise console verbosity one level above WARNING per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Lower console verbosity one level below WARNING per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to.",
    default=DEFAULT_LOG_PATH,
    envvar="PARASEMPRE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PARASEMPRE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING or ERROR occurs."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Applies to "
        "both console and flight recorder. Repeatable, e.g. -L sqlalchemy=INFO."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def parasempre(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """PARASEMPRE command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    settings = LoggingSettings(
        level=level,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, app_version=__version__, settings=settings, handlers=handlers)

    ctx.call_on_close(logging.shutdown)


parasempre.add_command(db_group)
parasempre.add_command(guests_group)
parasempre.add_command(users_group)

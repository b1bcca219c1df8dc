"""Command: elapsed time since a date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from elapsed.commands._base import ElapsedCommand
from elapsed.domain.formats import MODE_CHOICES

if TYPE_CHECKING:
    from elapsed.commands._context import AppContext


@click.command(
    cls=ElapsedCommand,
    examples="""\
  elapsed since 2020-01-30
  elapsed since 2020-01-30 2020-03-01
  elapsed since 2018-02-03 --format year-month
  elapsed since 2020-12-30 2023-03-12 -f year-day
  elapsed --json since 2020-01-30 2020-03-01""",
)
@click.argument("date", metavar="DATE")
@click.argument("now", metavar="[NOW]", required=False)
@click.option(
    "-f",
    "--format",
    "mode",
    type=click.Choice(MODE_CHOICES, case_sensitive=False),
    default=None,
    help="Output format (defaults to [since] format in elapsed.toml, else 'default').",
)
@click.pass_obj
def since(app: AppContext, date: str, now: str | None, mode: str | None) -> None:
    """Calculate elapsed time since DATE (format YYYY-MM-DD).

    NOW is the reference date in the same format and defaults to today.
    """
    from elapsed.services.since import SinceService

    app.emit(SinceService(app.settings.since).since(date, now, mode=mode))

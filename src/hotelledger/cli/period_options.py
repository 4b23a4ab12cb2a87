"""CLI helpers for period resolution."""

import click

from hotelledger.cli.error_handling import handle_domain_error
from hotelledger.domain.entities import Period
from hotelledger.domain.errors import DomainError, NotFoundError, no_batches
from hotelledger.domain.ledger_store import LedgerStore
from hotelledger.utils.period import parse_period, validate_period


def period_option(command):
    """Attach the --period/--year/--month options to a command."""
    command = click.option("--month", type=int, help="Month (1-12), used with --year")(command)
    command = click.option("--year", type=int, help="Year (YYYY), used with --month")(command)
    command = click.option(
        "--period",
        "period_str",
        help="Period such as '2024-07' or '07/2024' (defaults to the latest upload)",
    )(command)
    return command


def resolve_cli_period(
    ctx: click.Context,
    store: LedgerStore,
    *,
    period_str: str | None,
    year: int | None,
    month: int | None,
) -> Period:
    """Resolve the selected period from CLI options or the latest upload."""
    if period_str and (year is not None or month is not None):
        click.echo("Error: --period cannot be combined with --year/--month.", err=True)
        ctx.exit(1)

    if (year is None) != (month is None):
        click.echo("Error: --year and --month must be given together.", err=True)
        ctx.exit(1)

    try:
        if period_str:
            return parse_period(period_str)
        if year is not None and month is not None:
            return validate_period(year, month)
        latest = store.latest_period()
        if latest is None:
            raise NotFoundError(no_batches())
        return latest
    except DomainError as e:
        handle_domain_error(ctx, e)

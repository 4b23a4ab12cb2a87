"""Business area summary command."""

import click
from hotelledger.cli.period_options import period_option, resolve_cli_period
from hotelledger.domain.aggregation import aggregate
from hotelledger.domain.comparison import ComparisonService
from hotelledger.utils.formatting import format_currency, format_diff, format_percent
from hotelledger.utils.period import month_name


@click.command("areas")
@period_option
@click.pass_context
def area_summary(ctx, period_str: str | None, year: int | None, month: int | None):
    """Show totals per business area and ledger kind."""
    store = ctx.obj["store"]
    period = resolve_cli_period(
        ctx, store, period_str=period_str, year=year, month=month
    )
    aggregates = aggregate(ComparisonService(store).compare_period(period))

    if not aggregates:
        click.echo("No balances found.")
        return

    click.echo(f"\nBusiness areas {month_name(period.month)} {period.year}:")
    click.echo("-" * 112)
    click.echo(
        f"{'Area':<24} {'Kind':<8} {'Current':>16} {'Δ prev. month':>16} "
        f"{'%':>8} {'Δ prev. year':>16} {'%':>8} {'Accts':>6}"
    )
    click.echo("-" * 112)
    for agg in aggregates:
        click.echo(
            f"{agg.area.value:<24} {agg.kind.value:<8} "
            f"{format_currency(agg.current):>16} "
            f"{format_diff(agg.delta_vs_previous_month):>16} "
            f"{format_percent(agg.delta_pct_vs_previous_month):>8} "
            f"{format_diff(agg.delta_vs_previous_year):>16} "
            f"{format_percent(agg.delta_pct_vs_previous_year):>8} "
            f"{agg.account_count:>6}"
        )


def register_commands(cli):
    """Register areas command with main CLI."""
    cli.add_command(area_summary)

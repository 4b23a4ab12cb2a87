"""Period comparison command."""

import click
from hotelledger.cli.period_options import period_option, resolve_cli_period
from hotelledger.domain.comparison import ComparisonService
from hotelledger.domain.entities import BusinessArea, LedgerKind
from hotelledger.utils.formatting import format_currency, format_percent
from hotelledger.utils.period import month_name


@click.command("compare")
@period_option
@click.option(
    "--area",
    type=click.Choice([a.value for a in BusinessArea]),
    help="Only show accounts of this business area",
)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in LedgerKind]),
    help="Only show accounts of this ledger kind",
)
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(["number", "magnitude"]),
    default="number",
    show_default=True,
    help="Order rows by account number or by absolute current balance",
)
@click.pass_context
def compare_period(
    ctx,
    period_str: str | None,
    year: int | None,
    month: int | None,
    area: str | None,
    kind: str | None,
    sort_by: str,
):
    """Compare account balances with the previous month and previous year.

    Missing comparison data is shown as '–', never as zero.
    """
    store = ctx.obj["store"]
    period = resolve_cli_period(
        ctx, store, period_str=period_str, year=year, month=month
    )
    rows = ComparisonService(store).compare_period(period)

    if area:
        rows = [r for r in rows if r.area.value == area]
    if kind:
        rows = [r for r in rows if r.kind.value == kind]

    if not rows:
        click.echo("No balances found.")
        return

    if sort_by == "magnitude":
        rows = sorted(rows, key=lambda r: (-abs(r.current or 0), r.account_number))

    click.echo(f"\nComparison {month_name(period.month)} {period.year}:")
    click.echo("-" * 118)
    click.echo(
        f"{'Account':<8} {'Name':<28} {'Current':>16} {'Prev. month':>16} "
        f"{'Δ %':>8} {'Prev. year':>16} {'Δ %':>8}  Area"
    )
    click.echo("-" * 118)
    for row in rows:
        click.echo(
            f"{row.account_number:<8} {row.account_name[:28]:<28} "
            f"{format_currency(row.current):>16} "
            f"{format_currency(row.previous_month):>16} "
            f"{format_percent(row.delta_pct_vs_previous_month):>8} "
            f"{format_currency(row.previous_year):>16} "
            f"{format_percent(row.delta_pct_vs_previous_year):>8}  "
            f"{row.area.value}"
        )


def register_commands(cli):
    """Register compare command with main CLI."""
    cli.add_command(compare_period)

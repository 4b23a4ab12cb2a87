"""Department KPI command."""

import click
from hotelledger.cli.period_options import period_option, resolve_cli_period
from hotelledger.domain.kpi import department_kpis, total_kpis
from hotelledger.utils.formatting import format_currency, format_percent
from hotelledger.utils.period import month_name


@click.command("kpi")
@period_option
@click.pass_context
def show_kpis(ctx, period_str: str | None, year: int | None, month: int | None):
    """Show revenue and contribution margins per department."""
    store = ctx.obj["store"]
    period = resolve_cli_period(
        ctx, store, period_str=period_str, year=year, month=month
    )
    kpis = department_kpis(store, period.year, period.month)

    click.echo(f"\nDepartment KPIs {month_name(period.month)} {period.year}:")
    click.echo("-" * 100)
    click.echo(
        f"{'Department':<24} {'Revenue':>16} {'Margin I':>16} {'Margin II':>16} "
        f"{'Revenue Δ PY':>16} {'%':>8}"
    )
    click.echo("-" * 100)
    for k in kpis:
        click.echo(
            f"{k.area.value:<24} {format_currency(k.revenue):>16} "
            f"{format_currency(k.margin_1):>16} {format_currency(k.margin_2):>16} "
            f"{format_currency(k.revenue_delta):>16} "
            f"{format_percent(k.revenue_delta_pct):>8}"
        )

    totals = total_kpis(kpis)
    click.echo("-" * 100)
    click.echo(
        f"{'Total (operating)':<24} {format_currency(totals['revenue']):>16} "
        f"{format_currency(totals['margin_1']):>16} "
        f"{format_currency(totals['margin_2']):>16}"
    )


def register_commands(cli):
    """Register kpi command with main CLI."""
    cli.add_command(show_kpis)

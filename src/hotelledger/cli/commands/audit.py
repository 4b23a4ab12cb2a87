"""Data quality audit command."""

import click
from hotelledger.domain.data_quality import audit
from hotelledger.utils.formatting import format_currency
from hotelledger.utils.period import month_name


@click.command("audit")
@click.option("--details", is_flag=True, help="List every unclassified and untyped account")
@click.pass_context
def audit_ledger(ctx, details: bool):
    """Check the ledger for classification gaps and missing months.

    Findings are informational; nothing in the ledger is changed.
    """
    report = audit(ctx.obj["store"])

    click.echo("\nData quality report:")
    click.echo("-" * 60)
    click.echo(f"  Accounts: {report.total_accounts}")
    click.echo(f"  Balances: {report.total_balances}")
    click.echo(f"  Uploaded periods: {len(report.present_periods)}")
    click.echo(f"  Accounts without area (Sonstiges): {len(report.unclassified_accounts)}")
    click.echo(f"  Accounts without kind (Neutral): {len(report.untyped_accounts)}")

    if details:
        for title, accounts in (
            ("Accounts without area", report.unclassified_accounts),
            ("Accounts without kind", report.untyped_accounts),
        ):
            if accounts:
                click.echo(f"\n{title}:")
                for acc in accounts:
                    click.echo(f"  {acc.number:<8} {acc.name:<40} class {acc.account_class}")

    if report.class_reconciliation:
        click.echo("\nClass reconciliation:")
        click.echo(
            f"  {'Class':<10} {'Accts':>6} {'Debit':>18} {'Credit':>18} {'Net':>18}"
        )
        for entry in report.class_reconciliation:
            click.echo(
                f"  {entry.account_class:<10} {entry.account_count:>6} "
                f"{format_currency(entry.debit_total):>18} "
                f"{format_currency(entry.credit_total):>18} "
                f"{format_currency(entry.net_total):>18}"
            )

    if report.missing_periods:
        click.echo("\nPeriods:")
        for period in report.missing_periods:
            status = "ok" if period.present else "MISSING"
            click.echo(f"  {month_name(period.month):<10} {period.year}  {status}")
        gaps = report.gaps
        if gaps:
            click.echo(f"\n{len(gaps)} missing period{'s' if len(gaps) != 1 else ''}.")


def register_commands(cli):
    """Register audit command with main CLI."""
    cli.add_command(audit_ledger)

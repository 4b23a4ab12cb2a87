"""Account listing commands."""

import click
from hotelledger.domain.entities import BusinessArea, LedgerKind


@click.group()
def account_group():
    """Inspect classified accounts."""
    pass


@account_group.command("list")
@click.option(
    "--area",
    type=click.Choice([a.value for a in BusinessArea]),
    help="Only list accounts of this business area",
)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in LedgerKind]),
    help="Only list accounts of this ledger kind",
)
@click.pass_context
def list_accounts(ctx, area: str | None, kind: str | None):
    """List all accounts with their classification.

    Examples:
        hotelledger accounts list
        hotelledger accounts list --area Logis
        hotelledger accounts list --kind Neutral
    """
    accounts = ctx.obj["store"].accounts
    if area:
        accounts = [a for a in accounts if a.area.value == area]
    if kind:
        accounts = [a for a in accounts if a.kind.value == kind]

    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 100)
    for acc in accounts:
        click.echo(
            f"{acc.number:<8} | {acc.name[:36]:36s} | Class {acc.account_class:<4} | "
            f"{acc.area.value:<22} | {acc.kind.value}"
        )


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="accounts")

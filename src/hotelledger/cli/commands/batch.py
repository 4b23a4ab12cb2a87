"""Upload batch commands."""

import click
from hotelledger.cli.error_handling import handle_domain_error
from hotelledger.domain.errors import DomainError
from hotelledger.utils.period import month_name


@click.group()
def batch_group():
    """Manage upload batch records."""
    pass


@batch_group.command("list")
@click.pass_context
def list_batches(ctx):
    """List uploaded Saldenlisten."""
    batches = ctx.obj["store"].batches
    if not batches:
        click.echo("No uploads found.")
        return

    click.echo("\nUploads:")
    click.echo("-" * 80)
    for batch in batches:
        click.echo(
            f"{batch.filename:<28} | {month_name(batch.month):<9} {batch.year} | "
            f"{batch.account_count:5d} accounts | {batch.imported_at:%Y-%m-%d %H:%M}"
        )


@batch_group.command("remove")
@click.argument("filename")
@click.pass_context
def remove_batch(ctx, filename: str):
    """Remove the upload record for FILENAME.

    Only the upload record is removed. Balances merged from the file stay in
    the ledger; re-import another file for the period to replace them.
    """
    try:
        removed = ctx.obj["store"].remove_batch(filename)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not removed:
        click.echo(f"Error: No upload named '{filename}'", err=True)
        ctx.exit(1)
    click.echo(f"Removed upload record '{filename}' (balances kept)")


def register_commands(cli):
    """Register batch commands with main CLI."""
    cli.add_command(batch_group, name="batch")

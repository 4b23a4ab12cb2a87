"""Saldenliste import command."""

import click
from hotelledger.domain.errors import DomainError
from hotelledger.domain.ledger_import import LedgerImportService
from hotelledger.utils.period import month_name


@click.command("import")
@click.argument("csv_files", nargs=-1, required=True, type=click.Path(exists=True))
@click.pass_context
def import_csv(ctx, csv_files: tuple[str, ...]):
    """Import one or more Saldenliste exports.

    Files must be named Saldenliste-MM-YYYY.csv. Re-importing a period
    replaces its balances and batch record.

    Examples:
        hotelledger import Saldenliste-07-2024.csv
        hotelledger import exports/Saldenliste-*.csv
    """
    settings = ctx.obj["settings"]
    service = LedgerImportService(
        ctx.obj["store"], number_format=settings.number_format()
    )

    failed = 0
    for csv_file in csv_files:
        try:
            result = service.import_file(csv_file)
        except (DomainError, FileNotFoundError) as e:
            click.echo(f"Error: {csv_file}: {e}", err=True)
            failed += 1
            continue

        click.echo(
            f"\nImported {result['filename']} "
            f"({month_name(result['month'])} {result['year']}):"
        )
        click.echo(f"  Accounts: {result['accounts']}")
        click.echo(f"  Balances: {result['balances']}")
        if result["skipped"]:
            click.echo(f"  Skipped rows: {result['skipped']}")
            for error in result["errors"]:
                click.echo(f"    {error}", err=True)

    if failed:
        ctx.exit(1)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)

"""Main CLI entry point."""

import click

from hotelledger.database.factories import create_sqlite_database
from hotelledger.domain.errors import DomainError
from hotelledger.domain.ledger_store import LedgerStore
from hotelledger.settings import Settings
from hotelledger.utils.logger import get_app_logger

# Import and register all commands at module level
from hotelledger.cli.commands import (
    account,
    areas,
    audit,
    batch,
    compare,
    import_cmd,
    kpi,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides HOTELLEDGER_DB_PATH environment variable)",
    envvar="HOTELLEDGER_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log import progress to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Hotelledger - trial balance reconciliation for hotel ledgers.

    Import monthly Saldenliste exports, compare periods by account and
    business area, and audit the ledger for gaps.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            settings = Settings.from_env()
        except DomainError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        logger = get_app_logger("INFO" if verbose else settings.log_level)
        db = create_sqlite_database(database_path=db_path or settings.db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["settings"] = settings
        ctx.obj["db"] = db
        ctx.obj["store"] = LedgerStore.load(db, page_size=settings.page_size, logger=logger)


# Register all commands
import_cmd.register_commands(cli)
compare.register_commands(cli)
areas.register_commands(cli)
audit.register_commands(cli)
kpi.register_commands(cli)
account.register_commands(cli)
batch.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

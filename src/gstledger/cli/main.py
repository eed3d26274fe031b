"""Main CLI entry point."""

import logging

import click
from gstledger.config import load_settings
from gstledger.database.factories import create_sqlite_database
from gstledger.domain.errors import DomainError
from gstledger.ledger import create_ledger
from gstledger.logging_config import configure_logging

# Import and register all commands at module level
from gstledger.cli.commands import (
    account,
    import_cmd,
    categorize,
    journal,
    balance,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides GSTLEDGER_DB_PATH environment variable)",
    envvar="GSTLEDGER_DB_PATH",
)
@click.option(
    "--inputs-dir",
    type=click.Path(file_okay=False),
    help="Directory holding <bank code>.csv statements (overrides GSTLEDGER_INPUTS_DIR)",
)
@click.option("--verbose", "-v", count=True, help="Show progress (-v) or debug (-vv) logging")
@click.pass_context
def cli(ctx, db_path: str | None, inputs_dir: str | None, verbose: int):
    """GST Ledger - double-entry bookkeeping from bank statements.

    Import bank statement CSV files into a balanced general journal, split
    out GST, categorise entries and report account balances.
    """
    ctx.ensure_object(dict)

    if verbose:
        configure_logging(logging.DEBUG if verbose > 1 else logging.INFO)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            settings = load_settings(inputs_dir=inputs_dir)
        except DomainError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["ledger"] = create_ledger(db, settings)
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
import_cmd.register_commands(cli)
categorize.register_commands(cli)
journal.register_commands(cli)
balance.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

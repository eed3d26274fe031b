"""Bank statement import command."""

import click
from gstledger.cli.error_handling import handle_domain_error
from gstledger.domain.errors import DomainError


@click.command("import")
@click.option("--file", "csv_file", type=click.Path(exists=True, dir_okay=False), help="Import a single statement file")
@click.option("--bank", help="Bank account code for --file (defaults to the file name)")
@click.pass_context
def import_statements(ctx, csv_file: str | None, bank: str | None):
    """Import bank statements into the general journal.

    Without --file, every <bank code>.csv in the inputs directory is imported.
    Rows already in the journal are skipped, so importing again is safe.

    Examples:
        gstledger import
        gstledger import --file statements/july.csv --bank 001
    """
    ledger = ctx.obj["ledger"]
    if bank is not None and csv_file is None:
        click.echo("Error: --bank can only be used together with --file", err=True)
        ctx.exit(1)

    try:
        if csv_file is not None:
            files = [ledger.statements.load_single_file(csv_file, bank_code=bank)]
        else:
            files = ledger.statements.load_files()
        result = ledger.importer.import_statements(files)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nImport complete:")
    click.echo(f"  Imported: {result['imported']} entries")
    click.echo(f"  Skipped: {result['skipped']} already recorded")
    for warning in result["warnings"]:
        click.echo(f"  Warning: {warning}")
    if result["errors"]:
        click.echo(f"  Errors: {len(result['errors'])}")
        for error in result["errors"]:
            click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_statements)

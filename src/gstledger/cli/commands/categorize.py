"""Categorisation commands."""

import click
from gstledger.cli.account_resolution import resolve_account_or_exit
from gstledger.cli.error_handling import handle_domain_error
from gstledger.domain.errors import DomainError
from gstledger.utils.supplier_note_parser import extract_supplier


@click.command("categorize")
@click.argument("entry_id", metavar="ENTRY_ID")
@click.argument("account", metavar="ACCOUNT")
@click.option("--notes", help="Replace the entry's notes")
@click.pass_context
def categorize_entry(ctx, entry_id: str, account: str, notes: str | None):
    """Post a journal entry to a different account.

    ENTRY_ID may be shortened to any unique prefix. ACCOUNT can be an account
    code or name. GST is split out again for the new account.

    Examples:
        gstledger categorize 3f2a9c 420
        gstledger categorize 3f2a9c "Office Supplies" --notes "Printer paper"
    """
    ledger = ctx.obj["ledger"]
    account_code = resolve_account_or_exit(ctx, ledger.accounts, account)

    try:
        entry = ledger.journal.resolve_entry_id(entry_id)
        result = ledger.categorizer.recategorize(entry.entry_id, account_code, notes=notes)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Entry {entry.entry_id[:8]} '{entry.description}' posted to {account_code}")
    if result.warning:
        click.echo(f"Warning: {result.warning}")


@click.command("uncategorized")
@click.pass_context
def list_uncategorized(ctx):
    """List journal entries still waiting for categorisation."""
    ledger = ctx.obj["ledger"]
    try:
        entries = ledger.categorizer.uncategorized_entries()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No uncategorised entries.")
        return

    click.echo(f"\nUncategorised entries ({len(entries)}):")
    click.echo("-" * 80)
    for entry in entries:
        line = f"{entry.entry_id[:8]} | {entry.date.isoformat()} | {entry.description:35s} | ${entry.amount:>10,.2f}"
        supplier = extract_supplier(entry.notes)
        if supplier is not None:
            name, confidence = supplier
            line += f" | suggested: {name} ({confidence:.0%})"
        click.echo(line)


def register_commands(cli):
    """Register categorisation commands with main CLI."""
    cli.add_command(categorize_entry)
    cli.add_command(list_uncategorized)

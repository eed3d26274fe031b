"""General journal commands."""

import click
from gstledger.cli.account_resolution import resolve_account_or_exit
from gstledger.cli.error_handling import handle_domain_error
from gstledger.domain.errors import DomainError
from gstledger.domain.matching import find_exact_duplicates
from gstledger.utils.date_parser import parse_date


def _format_lines(lines) -> str:
    return ", ".join(f"{line.account_code} ${line.amount:,.2f}" for line in lines)


@click.group()
def journal_group():
    """Inspect and correct the general journal."""
    pass


@journal_group.command("list")
@click.option("--account", help="Only entries touching this account (code or name)")
@click.option("--start-date", help="Start date (inclusive)")
@click.option("--end-date", help="End date (inclusive)")
@click.option("--verbose", "-v", is_flag=True, help="Show split lines and notes")
@click.pass_context
def list_entries(ctx, account: str | None, start_date: str | None, end_date: str | None, verbose: bool):
    """List journal entries.

    Examples:
        gstledger journal list
        gstledger journal list --account 001 --start-date "this month"
        gstledger journal list --start-date 2024-07-01 --end-date 2024-09-30 -v
    """
    ledger = ctx.obj["ledger"]

    try:
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None
        entries = ledger.entries_by_date_range(start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if account is not None:
        account_code = resolve_account_or_exit(ctx, ledger.accounts, account)
        entries = [entry for entry in entries if entry.references(account_code)]

    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo(f"\nJournal entries ({len(entries)}):")
    click.echo("-" * 80)
    for entry in entries:
        click.echo(
            f"{entry.entry_id[:8]} | {entry.date.isoformat()} | {entry.description:35s} | ${entry.amount:>10,.2f}"
        )
        if verbose:
            click.echo(f"         Dr: {_format_lines(entry.debit_lines)}")
            click.echo(f"         Cr: {_format_lines(entry.credit_lines)}")
            if entry.notes:
                click.echo(f"         Notes: {entry.notes}")


@journal_group.command("remove")
@click.argument("entry_id", metavar="ENTRY_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def remove_entry(ctx, entry_id: str, yes: bool):
    """Delete a journal entry.

    Intended for manual corrections. ENTRY_ID may be any unique prefix.
    """
    ledger = ctx.obj["ledger"]
    try:
        entry = ledger.journal.resolve_entry_id(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    prompt = f"Delete '{entry.description}' on {entry.date.isoformat()} for ${entry.amount:,.2f}?"
    if not yes and not click.confirm(prompt):
        click.echo("Deletion cancelled.")
        return

    if ledger.remove(entry):
        click.echo(f"Deleted entry {entry.entry_id[:8]}")
    else:
        click.echo(f"Error: Journal entry {entry_id} not found", err=True)
        ctx.exit(1)


@journal_group.command("validate")
@click.pass_context
def validate_journal(ctx):
    """Check the journal against the chart of accounts.

    Reports account codes missing from the chart of accounts and entries that
    are exact duplicates of one another.
    """
    ledger = ctx.obj["ledger"]
    try:
        entries = ledger.journal.entries
        unknown = ledger.journal.unknown_account_codes()
    except DomainError as e:
        handle_domain_error(ctx, e)

    duplicates = find_exact_duplicates(entries, ledger.accounts)

    click.echo(f"Checked {len(entries)} journal entries")
    for code, count in unknown.items():
        click.echo(f"  Unknown account code {code} used by {count} entr{'y' if count == 1 else 'ies'}")
    for group in duplicates:
        first = group[0]
        click.echo(
            f"  {len(group)} identical entries: '{first.description}' on {first.date.isoformat()} "
            f"for ${first.amount:,.2f}"
        )

    if unknown:
        ctx.exit(1)
    click.echo("Journal is consistent with the chart of accounts")


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(journal_group, name="journal")

"""Balance commands."""

import click
from gstledger.cli.account_resolution import resolve_account_or_exit
from gstledger.cli.error_handling import handle_domain_error
from gstledger.domain.errors import DomainError
from gstledger.utils.date_parser import parse_date


@click.command("balance")
@click.argument("account", metavar="ACCOUNT")
@click.option("--as-of", help="Include entries up to this date (default: today)")
@click.pass_context
def show_balance(ctx, account: str, as_of: str | None):
    """Show an account's balance.

    ACCOUNT can be an account code or name. Bank accounts also show the
    difference to the balance reported on the latest statement row.

    Examples:
        gstledger balance 001
        gstledger balance "Office Supplies" --as-of 2024-06-30
    """
    ledger = ctx.obj["ledger"]
    account_code = resolve_account_or_exit(ctx, ledger.accounts, account)

    try:
        as_of_date = parse_date(as_of) if as_of else None
        balance = ledger.balance_as_of(account_code, as_of_date)
        acc = ledger.accounts.lookup(account_code)
        variance = ledger.balances.statement_variance(account_code, as_of_date) if acc.is_bank else None
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"{acc.code} {acc.name}: ${balance:,.2f}")
    if variance is not None and variance != 0:
        click.echo(f"Warning: differs from the statement balance by ${variance:,.2f}")


def register_commands(cli):
    """Register balance command with main CLI."""
    cli.add_command(show_balance)

"""Chart of accounts commands."""

import click
from gstledger.cli.error_handling import handle_domain_error
from gstledger.domain.entities import AccountCategory, TaxTreatment
from gstledger.domain.errors import DomainError


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("load")
@click.argument("json_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def load_accounts(ctx, json_file: str):
    """Load accounts from a chart-of-accounts JSON file.

    Accounts whose code already exists are left unchanged.

    Examples:
        gstledger account load accounts.json
    """
    registry = ctx.obj["ledger"].accounts
    try:
        result = registry.load_from_json(json_file)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Loaded chart of accounts: {result['created']} created, {result['skipped']} already present")


@account_group.command("create")
@click.argument("code", metavar="CODE")
@click.argument("name", metavar="NAME")
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.value for c in AccountCategory], case_sensitive=False),
    help="Account category",
)
@click.option("--gst/--no-gst", default=False, help="Whether GST applies to postings on this account")
@click.option(
    "--gst-type",
    type=click.Choice([t.value for t in TaxTreatment], case_sensitive=False),
    default=TaxTreatment.BAS_EXCLUDED.value,
    help="GST treatment",
)
@click.pass_context
def create_account(ctx, code: str, name: str, category: str, gst: bool, gst_type: str):
    """Create a new account.

    Examples:
        gstledger account create 001 "Business Cheque" --category Bank
        gstledger account create 420 "Office Supplies" --category Expense --gst --gst-type "GST on Expenses"
    """
    registry = ctx.obj["ledger"].accounts
    try:
        account = registry.create_account(
            code=code,
            name=name,
            category=AccountCategory.from_label(category),
            tax_applicable=gst,
            tax_treatment=TaxTreatment.from_label(gst_type),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account {account.code} '{account.name}' ({account.category.value})")


@account_group.command("list")
@click.option(
    "--category",
    type=click.Choice([c.value for c in AccountCategory], case_sensitive=False),
    help="Only show accounts of this category",
)
@click.pass_context
def list_accounts(ctx, category: str | None):
    """List accounts in the chart of accounts."""
    registry = ctx.obj["ledger"].accounts
    if category is not None:
        accounts = registry.by_category(AccountCategory.from_label(category))
    else:
        accounts = registry.list_accounts()

    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        gst = "GST" if acc.tax_applicable else "   "
        click.echo(f"{acc.code:>6s} | {acc.name:30s} | {acc.category.value:17s} | {gst} | {acc.tax_treatment.value}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")

"""CLI helpers for account resolution."""

from __future__ import annotations

import click
from gstledger.domain.account import ChartOfAccountsService
from gstledger.domain.errors import DomainError
from gstledger.utils.account_resolver import resolve_account_code


def resolve_account_or_exit(ctx: click.Context, registry: ChartOfAccountsService, account: str) -> str:
    """Resolve account code or name, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account_code(registry, account)
    except DomainError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)

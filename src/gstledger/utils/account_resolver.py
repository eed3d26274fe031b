"""Utility for resolving account names to codes."""

from gstledger.domain.errors import NotFoundError, ValidationError, account_not_found


def resolve_account_code(registry, account: str) -> str:
    """Resolve an account code or name to an account code.

    Args:
        registry: ChartOfAccountsService instance
        account: Account code (e.g. "400") or account name (case-insensitive)

    Returns:
        Account code

    Raises:
        NotFoundError: If no account has that code or name
        ValidationError: If the name matches more than one account
    """
    account = account.strip()
    if registry.lookup(account) is not None:
        return account

    matches = [acc for acc in registry.list_accounts() if acc.name.lower() == account.lower()]
    if len(matches) == 1:
        return matches[0].code
    if len(matches) > 1:
        codes = ", ".join(acc.code for acc in matches)
        raise ValidationError(f"Account name '{account}' is ambiguous (codes: {codes})")

    raise NotFoundError(account_not_found(account))

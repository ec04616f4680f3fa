"""Utility for resolving account names to IDs."""

from finledger.domain.errors import NotFoundError, ValidationError
from finledger.domain.ledger import LedgerService


def resolve_account(ledger: LedgerService, account: str) -> str:
    """Resolve an account ID or name to an account ID.

    Tries an exact ID match first, then an exact name match, then a
    case-insensitive name match.

    Args:
        ledger: Ledger holding the accounts
        account: Account ID or name

    Returns:
        Account ID

    Raises:
        NotFoundError: If no account matches
        ValidationError: If a name matches more than one account
    """
    if ledger.get_account(account) is not None:
        return account

    accounts = ledger.get_all_accounts()
    for matcher in (
        lambda acc: acc.name == account,
        lambda acc: acc.name.lower() == account.strip().lower(),
    ):
        matches = [acc for acc in accounts if matcher(acc)]
        if len(matches) == 1:
            return matches[0].id
        if len(matches) > 1:
            ids = ", ".join(acc.id for acc in matches)
            raise ValidationError(
                f"Account name '{account}' is ambiguous (matches {ids}); use the account ID"
            )

    raise NotFoundError(f"Account '{account}' not found")

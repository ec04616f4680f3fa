"""CLI helpers for account resolution and error handling."""

from __future__ import annotations

import click
from finledger.cli.error_handling import handle_domain_error
from finledger.domain.errors import DomainError
from finledger.domain.ledger import LedgerService
from finledger.utils.account_resolver import resolve_account


def resolve_account_or_exit(ctx: click.Context, ledger: LedgerService, account: str) -> str:
    """Resolve account name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(ledger, account)
    except DomainError as exc:
        handle_domain_error(ctx, exc)

"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Malformed or out-of-range input, detected before any state change."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Requested account does not exist."""


class DuplicateKeyError(DomainError):
    """An account or transaction with the same identifier already exists."""


def account_not_found(account_id: str) -> str:
    """Return message for missing account."""
    return f"Account with ID {account_id} not found"


def account_already_exists(account_id: str) -> str:
    """Return message for duplicate account ID."""
    return f"Account with ID {account_id} already exists"


def transaction_account_not_found(account_id: str) -> str:
    """Return message when a transaction references a missing account."""
    return f"Account {account_id} not found for transaction"


def transaction_already_exists(transaction_id: str) -> str:
    """Return message for duplicate transaction ID."""
    return f"Transaction with ID {transaction_id} already exists"


def field_required(field: str) -> str:
    """Return message for a missing or blank required field."""
    label = field.replace("_", " ").capitalize()
    return f"{label} cannot be null or empty"


def amount_not_positive(amount) -> str:
    """Return message for a zero or negative amount."""
    return f"Amount must be positive, got {amount}"


def same_account_transfer(account_id: str) -> str:
    """Return message for a transfer whose source and destination match."""
    return f"Cannot transfer to the same account ({account_id})"


def unknown_choice(kind: str, value: str, choices: list[str]) -> str:
    """Return message for an unrecognized enumeration name."""
    return f"Unknown {kind} '{value}'. Choose one of: {', '.join(choices)}"

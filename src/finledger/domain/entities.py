"""Domain model entities for finledger.

Accounts and transactions are mutable, identity-bearing objects: two
instances are equal when their IDs match. Every mutator re-runs the same
validation as the constructor so a created object and an updated object
obey identical invariants.
"""

import uuid
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from finledger.domain.errors import (
    ValidationError,
    amount_not_positive,
    field_required,
    unknown_choice,
)


class _LabelledEnum(Enum):
    """Enum whose members carry a display name and a description."""

    def __init__(self, display_name: str, description: str):
        self.display_name = display_name
        self.description = description

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_name(cls, name: str):
        """Look up a member by name, ignoring case, dashes and spaces."""
        if name is not None:
            key = name.strip().upper().replace("-", "_").replace(" ", "_")
            if key in cls.__members__:
                return cls.__members__[key]
        raise ValidationError(
            unknown_choice(_kind_label(cls), str(name), list(cls.__members__)),
            field=_kind_field(cls),
        )


def _kind_label(cls) -> str:
    return {
        "AccountType": "account type",
        "TransactionType": "transaction type",
        "Category": "category",
    }.get(cls.__name__, cls.__name__)


def _kind_field(cls) -> str:
    return _kind_label(cls).replace(" ", "_")


class AccountType(_LabelledEnum):
    """Kinds of financial account."""

    CHECKING = ("Checking Account", "Daily transactions and bill payments")
    SAVINGS = ("Savings Account", "Long-term savings with interest")
    CREDIT_CARD = ("Credit Card", "Credit line for purchases")
    INVESTMENT = ("Investment Account", "Stocks, bonds, and other investments")
    CASH = ("Cash", "Physical cash on hand")
    LOAN = ("Loan Account", "Personal or business loans")
    MORTGAGE = ("Mortgage", "Home or property loans")


class TransactionType(_LabelledEnum):
    """Direction of a transaction."""

    INCOME = ("Income", "Money coming in")
    EXPENSE = ("Expense", "Money going out")


_INCOME_CATEGORY_NAMES = frozenset(
    {"SALARY", "FREELANCE", "INVESTMENT", "BUSINESS", "GIFT", "OTHER_INCOME"}
)


class Category(_LabelledEnum):
    """Transaction categories, each either income-bearing or expense-bearing."""

    # Income categories
    SALARY = ("Salary", "Regular employment income")
    FREELANCE = ("Freelance", "Freelance or contract work")
    INVESTMENT = ("Investment Returns", "Dividends, interest, capital gains")
    BUSINESS = ("Business Income", "Business revenue")
    GIFT = ("Gift", "Gifts and donations received")
    OTHER_INCOME = ("Other Income", "Miscellaneous income")

    # Expense categories
    HOUSING = ("Housing", "Rent, mortgage, utilities")
    FOOD = ("Food & Dining", "Groceries, restaurants, food delivery")
    TRANSPORTATION = ("Transportation", "Gas, public transit, car maintenance")
    HEALTHCARE = ("Healthcare", "Medical expenses, insurance, pharmacy")
    ENTERTAINMENT = ("Entertainment", "Movies, games, hobbies, subscriptions")
    SHOPPING = ("Shopping", "Clothing, electronics, general purchases")
    EDUCATION = ("Education", "Tuition, books, courses")
    TRAVEL = ("Travel", "Vacations, hotels, flights")
    INSURANCE = ("Insurance", "Auto, health, life insurance")
    UTILITIES = ("Utilities", "Electricity, water, internet, phone")
    OTHER_EXPENSE = ("Other Expense", "Miscellaneous expenses")

    @property
    def is_income_category(self) -> bool:
        return self.name in _INCOME_CATEGORY_NAMES

    @property
    def is_expense_category(self) -> bool:
        return not self.is_income_category

    @classmethod
    def income_categories(cls) -> list["Category"]:
        return [category for category in cls if category.is_income_category]

    @classmethod
    def expense_categories(cls) -> list["Category"]:
        return [category for category in cls if category.is_expense_category]


def to_decimal(value, field: str = "amount") -> Decimal:
    """Convert an exact numeric value to Decimal.

    Accepts Decimal, int and numeric strings. Floats are rejected because
    they cannot represent most cent values exactly.

    Raises:
        ValidationError: If the value is missing, a float, or not numeric
    """
    if value is None:
        raise ValidationError(field_required(field), field=field)
    if isinstance(value, bool) or isinstance(value, float):
        raise ValidationError(
            f"{field.capitalize()} must be an exact decimal, not {type(value).__name__}",
            field=field,
        )
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValidationError(f"Invalid {field} '{value}'", field=field)
    else:
        raise ValidationError(
            f"{field.capitalize()} must be a decimal value, not {type(value).__name__}",
            field=field,
        )
    if not result.is_finite():
        raise ValidationError(f"{field.capitalize()} must be a finite number", field=field)
    return result


def _require_text(value: Optional[str], field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field_required(field), field=field)
    return value


def generate_account_id() -> str:
    """Return a fresh, readable account identifier."""
    return "ACC_" + uuid.uuid4().hex[:16].upper()


class Account:
    """A named store of value with a type and a running balance."""

    def __init__(
        self,
        id: str,
        name: str,
        account_type: AccountType,
        balance=None,
        description: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = _require_text(id, "account_id")
        self._name = _require_text(name, "account_name")
        self._account_type = self._check_type(account_type)
        self._balance = Decimal("0") if balance is None else to_decimal(balance, "balance")
        self._description = description
        now = datetime.now()
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def _check_type(account_type) -> AccountType:
        if not isinstance(account_type, AccountType):
            raise ValidationError(field_required("account_type"), field="account_type")
        return account_type

    def _touch(self) -> None:
        self._updated_at = datetime.now()

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _require_text(value, "account_name")
        self._touch()

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @account_type.setter
    def account_type(self, value: AccountType) -> None:
        self._account_type = self._check_type(value)
        self._touch()

    @property
    def description(self) -> Optional[str]:
        return self._description

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._description = value
        self._touch()

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_balance(self, delta) -> None:
        """Add a signed delta to the balance."""
        self._balance = self._balance + to_decimal(delta, "balance")
        self._touch()

    def has_sufficient_funds(self, amount) -> bool:
        return self._balance >= to_decimal(amount)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Account(id={self._id!r}, name={self._name!r}, "
            f"type={self._account_type.name}, balance={self._balance})"
        )


class Transaction:
    """A single movement of money against one account.

    The amount is always strictly positive; direction comes from the
    transaction type.
    """

    def __init__(
        self,
        id: str,
        account_id: str,
        transaction_type: TransactionType,
        amount,
        description: Optional[str] = None,
        category: Optional[Category] = None,
        date: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = _require_text(id, "transaction_id")
        self._account_id = _require_text(account_id, "account_id")
        self._transaction_type = self._check_type(transaction_type)
        self._amount = self._check_amount(amount)
        self._description = description
        self._category = self._check_category(category)
        now = datetime.now()
        self._date = date or now
        self._created_at = created_at or now

    @staticmethod
    def _check_type(transaction_type) -> TransactionType:
        if not isinstance(transaction_type, TransactionType):
            raise ValidationError(
                field_required("transaction_type"), field="transaction_type"
            )
        return transaction_type

    @staticmethod
    def _check_amount(amount) -> Decimal:
        value = to_decimal(amount, "amount")
        if value <= 0:
            raise ValidationError(amount_not_positive(value), field="amount")
        return value

    @staticmethod
    def _check_category(category) -> Optional[Category]:
        if category is not None and not isinstance(category, Category):
            raise ValidationError(
                f"Category must be a Category, not {type(category).__name__}",
                field="category",
            )
        return category

    @property
    def id(self) -> str:
        return self._id

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def transaction_type(self) -> TransactionType:
        return self._transaction_type

    @transaction_type.setter
    def transaction_type(self, value: TransactionType) -> None:
        self._transaction_type = self._check_type(value)

    @property
    def amount(self) -> Decimal:
        return self._amount

    @amount.setter
    def amount(self, value) -> None:
        self._amount = self._check_amount(value)

    @property
    def description(self) -> Optional[str]:
        return self._description

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._description = value

    @property
    def category(self) -> Optional[Category]:
        return self._category

    @category.setter
    def category(self, value: Optional[Category]) -> None:
        self._category = self._check_category(value)

    @property
    def date(self) -> datetime:
        return self._date

    @date.setter
    def date(self, value: Optional[datetime]) -> None:
        self._date = value if value is not None else datetime.now()

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def signed_amount(self) -> Decimal:
        """Amount with sign applied: positive for income, negative for expense."""
        if self._transaction_type is TransactionType.INCOME:
            return self._amount
        return -self._amount

    @property
    def is_income(self) -> bool:
        return self._transaction_type is TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self._transaction_type is TransactionType.EXPENSE

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id!r}, account_id={self._account_id!r}, "
            f"type={self._transaction_type.name}, amount={self._amount}, "
            f"description={self._description!r})"
        )

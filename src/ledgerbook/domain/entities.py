"""Domain model entities for ledgerbook.

These are pure data classes representing business concepts, independent of
database schema. Amounts are always ``Decimal``; dates are calendar dates
without time-of-day.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from typing import Optional

UNCATEGORIZED = "Uncategorized"

ZERO = Decimal("0")


@dataclass(frozen=True)
class AccountBook:
    """Account book domain entity (a workspace of accounts and rules)."""

    id: int
    name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class MonthlyBalance:
    """One month of an account's historical balance series."""

    month: str
    debits: Decimal
    credits: Decimal
    balance: Decimal


@dataclass(frozen=True)
class Account:
    """Account domain entity.

    The ``total_monthly_*`` fields and ``historical_balance`` are derived by
    the account aggregator and never set directly.
    """

    id: int
    name: str
    account_book_id: int
    total_monthly_balance: Decimal
    total_monthly_debits: Decimal
    total_monthly_credits: Decimal
    created_at: datetime
    updated_at: datetime
    historical_balance: tuple[MonthlyBalance, ...] = ()


@dataclass(frozen=True)
class TransactionDraft:
    """A transaction that has not been persisted yet."""

    transaction_date: date
    description: str
    category: str = UNCATEGORIZED
    sub_category: str = ""
    debit_amount: Decimal = ZERO
    credit_amount: Decimal = ZERO
    linked_transaction_id: Optional[int] = None


@dataclass(frozen=True)
class Transaction:
    """Persisted transaction domain entity."""

    id: int
    account_id: int
    account_book_id: int
    transaction_date: date
    description: str
    category: str
    sub_category: str
    debit_amount: Decimal
    credit_amount: Decimal
    linked_transaction_id: Optional[int]
    created_at: datetime
    updated_at: datetime

    @property
    def month(self) -> str:
        """Calendar month key (``YYYY-MM``) of the transaction date."""
        return self.transaction_date.strftime("%Y-%m")


@dataclass(frozen=True)
class CategoryRule:
    """Keyword to category mapping owned by an account book."""

    id: int
    account_book_id: int
    keyword: str
    category: str
    sub_category: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class MonthTotals:
    """Current-month snapshot stored on the account row."""

    balance: Decimal = ZERO
    debits: Decimal = ZERO
    credits: Decimal = ZERO


@dataclass
class ImportResult:
    """Outcome of a QIF import.

    ``parsed`` counts the records read from the file, ``imported`` the ones
    that were stored before the loop finished or stopped on an error.
    """

    parsed: int = 0
    imported: int = 0
    transactions: list[Transaction] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

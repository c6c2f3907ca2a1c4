"""Monthly balance aggregation for accounts.

An account's historical series is always rebuilt from its full transaction
history, so inserts and deletes in any order leave no stale months behind.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import MonthlyBalance, MonthTotals, Transaction, ZERO
from ledgerbook.domain.errors import NotFoundError, account_not_found
from ledgerbook.logging_setup import get_logger
from ledgerbook.utils.date_parser import format_month

logger = get_logger(__name__)


def build_monthly_series(transactions: Iterable[Transaction]) -> list[MonthlyBalance]:
    """Group transactions by month and attach a running balance.

    Months are sorted ascending; ``balance`` is the cumulative sum of
    ``credits - debits`` up to and including each month.
    """
    totals: dict[str, list[Decimal]] = defaultdict(lambda: [ZERO, ZERO])
    for txn in transactions:
        bucket = totals[format_month(txn.transaction_date)]
        bucket[0] += txn.debit_amount
        bucket[1] += txn.credit_amount

    series = []
    running = ZERO
    for month in sorted(totals):
        debits, credits = totals[month]
        running += credits - debits
        series.append(MonthlyBalance(month=month, debits=debits, credits=credits, balance=running))
    return series


def current_month_totals(series: Sequence[MonthlyBalance], today: Optional[date] = None) -> MonthTotals:
    """Return the snapshot totals for the month containing ``today``.

    All three values are zero when the series has no entry for that month.
    """
    month = format_month(today if today is not None else date.today())
    for entry in series:
        if entry.month == month:
            return MonthTotals(balance=entry.balance, debits=entry.debits, credits=entry.credits)
    return MonthTotals()


class AccountAggregator:
    """Recomputes and stores an account's derived monthly fields.

    This is the only writer of the historical series and the
    ``total_monthly_*`` fields.
    """

    def __init__(self, db: Database):
        """Initialize account aggregator.

        Args:
            db: Database instance
        """
        self.db = db

    def recompute(self, account_id: int, today: Optional[date] = None) -> list[MonthlyBalance]:
        """Rebuild and persist the monthly series of an account.

        Args:
            account_id: Account ID
            today: Date used to pick the current month (defaults to today)

        Returns:
            The stored monthly series

        Raises:
            NotFoundError: If account doesn't exist
        """
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        series = build_monthly_series(self.db.list_transactions(account_id=account_id))
        totals = current_month_totals(series, today=today)
        self.db.update_account_derived(account_id, series, totals)

        logger.debug(
            "Recomputed account %s: %d months, current balance %s",
            account_id,
            len(series),
            totals.balance,
        )
        return series

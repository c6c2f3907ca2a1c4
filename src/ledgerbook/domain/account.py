"""Account domain service."""

from datetime import date
from typing import Optional
from ledgerbook.database.base import Database
from ledgerbook.domain.aggregator import AccountAggregator
from ledgerbook.domain.entities import Account as AccountEntity, MonthlyBalance
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_book_not_found,
    account_not_found,
    account_not_in_book,
)
from ledgerbook.logging_setup import get_logger
from ledgerbook.utils.date_parser import get_last_month_range, get_month_range

logger = get_logger(__name__)


class AccountService:
    """Service for managing accounts and clearing their transactions."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db
        self.aggregator = AccountAggregator(db)

    def create_account(self, account_book_id: int, name: str) -> int:
        """Create a new account in an account book.

        Derived totals start at zero with an empty historical series.

        Args:
            account_book_id: Owning account book ID
            name: Account name

        Returns:
            Account ID

        Raises:
            NotFoundError: If account book doesn't exist
            ValidationError: If name is blank
        """
        if self.db.get_account_book(account_book_id) is None:
            raise NotFoundError(account_book_not_found(account_book_id))
        name = (name or "").strip()
        if not name:
            raise ValidationError("Account name is required")
        return self.db.create_account(name=name, account_book_id=account_book_id)

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def require_account(
        self, account_id: int, account_book_id: Optional[int] = None
    ) -> AccountEntity:
        """Get an account, optionally checking it belongs to an account book.

        Raises:
            NotFoundError: If account doesn't exist
            ValidationError: If account belongs to another account book
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        if account_book_id is not None and account.account_book_id != account_book_id:
            raise ValidationError(account_not_in_book(account_id, account_book_id))
        return account

    def list_accounts(self, account_book_id: int) -> list[AccountEntity]:
        """List the accounts of an account book."""
        return self.db.list_accounts(account_book_id)

    def delete_account(self, account_id: int) -> None:
        """Delete an account together with its transactions.

        Raises:
            NotFoundError: If account doesn't exist
        """
        self.require_account(account_id)
        self.db.delete_account(account_id)

    def recompute(self, account_id: int) -> list[MonthlyBalance]:
        """Rebuild the account's monthly series from its transactions."""
        return self.aggregator.recompute(account_id)

    def clear_month(self, account_id: int, month: str) -> int:
        """Delete an account's transactions for one ``YYYY-MM`` month.

        Returns:
            Number of transactions deleted

        Raises:
            NotFoundError: If account doesn't exist
            ValueError: If month is not a valid ``YYYY-MM`` key
        """
        start, end = get_month_range(month)
        return self._clear(account_id, start, end)

    def clear_last_month(self, account_id: int, today: Optional[date] = None) -> int:
        """Delete an account's transactions for the previous calendar month."""
        start, end = get_last_month_range(today)
        return self._clear(account_id, start, end)

    def clear_all(self, account_id: int) -> int:
        """Delete every transaction of an account."""
        return self._clear(account_id, None, None)

    def _clear(self, account_id: int, start: Optional[date], end: Optional[date]) -> int:
        self.require_account(account_id)
        deleted = self.db.delete_transactions(account_id, start_date=start, end_date=end)
        logger.info(
            "Cleared %d transactions from account %s (%s to %s)",
            deleted,
            account_id,
            start or "start",
            end or "end",
        )
        self.aggregator.recompute(account_id)
        return deleted

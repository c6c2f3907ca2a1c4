"""Transaction domain service."""

from typing import Optional, Sequence
from datetime import date
from decimal import Decimal
from ledgerbook.database.base import Database
from ledgerbook.domain.aggregator import AccountAggregator
from ledgerbook.domain.entities import (
    Transaction as TransactionEntity,
    TransactionDraft,
    UNCATEGORIZED,
    ZERO,
)
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    account_not_in_book,
    transaction_not_found,
)
from ledgerbook.utils.date_parser import get_month_range


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db
        self.aggregator = AccountAggregator(db)

    def create_transaction(
        self,
        account_id: int,
        account_book_id: int,
        transaction_date: date,
        description: str,
        debit_amount: Decimal = ZERO,
        credit_amount: Decimal = ZERO,
        category: Optional[str] = None,
        sub_category: Optional[str] = None,
    ) -> TransactionEntity:
        """Create a transaction manually and refresh the account totals.

        Args:
            account_id: Account ID
            account_book_id: Account book ID owning the account
            transaction_date: Transaction date
            description: Description
            debit_amount: Money out (non-negative)
            credit_amount: Money in (non-negative)
            category: Optional category, defaults to "Uncategorized"
            sub_category: Optional sub-category

        Returns:
            The stored transaction

        Raises:
            NotFoundError: If account doesn't exist
            ValidationError: If the description is blank, amounts are invalid
                or the account belongs to another account book
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        if account.account_book_id != account_book_id:
            raise ValidationError(account_not_in_book(account_id, account_book_id))

        description = (description or "").strip()
        if not description:
            raise ValidationError("Transaction description is required")

        if debit_amount < 0 or credit_amount < 0:
            raise ValidationError("Debit and credit amounts must not be negative")
        if debit_amount != 0 and credit_amount != 0:
            raise ValidationError("A transaction is either a debit or a credit, not both")

        draft = TransactionDraft(
            transaction_date=transaction_date,
            description=description,
            category=category or UNCATEGORIZED,
            sub_category=sub_category or "",
            debit_amount=debit_amount,
            credit_amount=credit_amount,
        )
        transaction = self.db.create_transaction(draft, account_id, account_book_id)
        self.aggregator.recompute(account_id)
        return transaction

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def update_category(
        self, transaction_id: int, category: Optional[str], sub_category: Optional[str] = None
    ) -> None:
        """Update one transaction's category.

        Args:
            transaction_id: Transaction ID
            category: Category, empty means "Uncategorized"
            sub_category: Optional sub-category

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.db.update_transaction_category(
            transaction_id, category or UNCATEGORIZED, sub_category or ""
        )

    def list_transactions(
        self,
        account_id: Optional[int] = None,
        account_book_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionEntity]:
        """List transactions ordered by date; ``end_date`` is exclusive."""
        return self.db.list_transactions(
            account_id=account_id,
            account_book_id=account_book_id,
            start_date=start_date,
            end_date=end_date,
        )

    def list_month(self, account_id: int, month: str) -> list[TransactionEntity]:
        """List an account's transactions for a ``YYYY-MM`` month.

        Raises:
            ValueError: If month is not a valid ``YYYY-MM`` key
        """
        start, end = get_month_range(month)
        return self.db.list_transactions(account_id=account_id, start_date=start, end_date=end)

    def update_categories(
        self,
        transaction_ids: Sequence[int],
        category: Optional[str],
        sub_category: Optional[str] = None,
    ) -> int:
        """Assign a category to many transactions.

        Amounts are unchanged, so account totals are not recomputed.

        Args:
            transaction_ids: Transaction IDs (duplicates are ignored)
            category: Category, empty means "Uncategorized"
            sub_category: Optional sub-category

        Returns:
            Number of transactions updated
        """
        unique_ids = list(dict.fromkeys(transaction_ids))
        return self.db.update_transactions_category(
            unique_ids, category or UNCATEGORIZED, sub_category or ""
        )

    def distinct_categories(self, account_book_id: int) -> list[str]:
        """Return the sorted, non-blank categories used in an account book."""
        categories = {
            txn.category
            for txn in self.db.list_transactions(account_book_id=account_book_id)
            if txn.category and txn.category.strip()
        }
        return sorted(categories, key=str.lower)

"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date

# Import entities directly to avoid pulling in the domain services
from ledgerbook.domain.entities import (
    AccountBook,
    Account,
    CategoryRule,
    MonthlyBalance,
    MonthTotals,
    Transaction,
    TransactionDraft,
)


class Database(ABC):
    """Abstract database interface for ledgerbook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted changes after a failed write."""
        pass

    # Account book operations
    @abstractmethod
    def create_account_book(self, name: str) -> int:
        """Create an account book. Returns account book ID."""
        pass

    @abstractmethod
    def get_account_book(self, account_book_id: int) -> Optional[AccountBook]:
        """Get account book by ID."""
        pass

    @abstractmethod
    def list_account_books(self) -> list[AccountBook]:
        """List account books, least recently updated first."""
        pass

    @abstractmethod
    def delete_account_book(self, account_book_id: int) -> None:
        """Delete an account book with its accounts, transactions and rules."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, name: str, account_book_id: int) -> int:
        """Create an account with zeroed derived fields. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID, including its historical balance series."""
        pass

    @abstractmethod
    def list_accounts(self, account_book_id: int) -> list[Account]:
        """List the accounts of an account book."""
        pass

    @abstractmethod
    def delete_account(self, account_id: int) -> None:
        """Delete an account with its transactions."""
        pass

    @abstractmethod
    def update_account_derived(
        self, account_id: int, series: Sequence[MonthlyBalance], totals: MonthTotals
    ) -> None:
        """Replace an account's historical series and current-month totals."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self, draft: TransactionDraft, account_id: int, account_book_id: int
    ) -> Transaction:
        """Persist a draft as a transaction. Returns the stored transaction.

        Raises:
            StorageError: If the write fails; nothing is left pending
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        account_id: Optional[int] = None,
        account_book_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List transactions ordered by date, then ID.

        Args:
            account_id: Optional account ID filter
            account_book_id: Optional account book ID filter
            start_date: Optional inclusive start date
            end_date: Optional exclusive end date
        """
        pass

    @abstractmethod
    def update_transaction_category(
        self, transaction_id: int, category: str, sub_category: str
    ) -> None:
        """Update the category of one transaction."""
        pass

    @abstractmethod
    def update_transactions_category(
        self, transaction_ids: Sequence[int], category: str, sub_category: str
    ) -> int:
        """Update the category of many transactions in one commit.

        Returns the number of rows updated.
        """
        pass

    @abstractmethod
    def delete_transactions(
        self,
        account_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> int:
        """Delete an account's transactions in [start_date, end_date).

        Returns the number of rows deleted.
        """
        pass

    # Category rule operations
    @abstractmethod
    def create_category_rule(
        self, account_book_id: int, keyword: str, category: str, sub_category: str = ""
    ) -> int:
        """Create a category rule. Returns rule ID."""
        pass

    @abstractmethod
    def get_category_rule(self, rule_id: int) -> Optional[CategoryRule]:
        """Get category rule by ID."""
        pass

    @abstractmethod
    def list_category_rules(self, account_book_id: int) -> list[CategoryRule]:
        """List an account book's rules in creation order."""
        pass

    @abstractmethod
    def delete_category_rule(self, rule_id: int) -> None:
        """Delete a category rule."""
        pass

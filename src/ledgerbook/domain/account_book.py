"""Account book domain service."""

from typing import Optional
from ledgerbook.database.base import Database
from ledgerbook.domain.entities import AccountBook
from ledgerbook.domain.errors import NotFoundError, ValidationError, account_book_not_found


class AccountBookService:
    """Service for managing account books."""

    def __init__(self, db: Database):
        """Initialize account book service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account_book(self, name: str) -> int:
        """Create a new account book.

        Args:
            name: Account book name

        Returns:
            Account book ID

        Raises:
            ValidationError: If name is blank
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Account book name is required")
        return self.db.create_account_book(name)

    def get_account_book(self, account_book_id: int) -> Optional[AccountBook]:
        """Get account book by ID."""
        return self.db.get_account_book(account_book_id)

    def require_account_book(self, account_book_id: int) -> AccountBook:
        """Get account book by ID, raising NotFoundError if missing."""
        book = self.db.get_account_book(account_book_id)
        if book is None:
            raise NotFoundError(account_book_not_found(account_book_id))
        return book

    def list_account_books(self) -> list[AccountBook]:
        """List all account books."""
        return self.db.list_account_books()

    def delete_account_book(self, account_book_id: int) -> None:
        """Delete an account book and everything it owns.

        Raises:
            NotFoundError: If account book doesn't exist
        """
        self.require_account_book(account_book_id)
        self.db.delete_account_book(account_book_id)

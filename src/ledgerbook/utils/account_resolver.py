"""Utility for resolving account book and account names to IDs."""

from ledgerbook.domain.account import AccountService
from ledgerbook.domain.account_book import AccountBookService


def _as_id(value: str | int) -> int | None:
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def resolve_account_book(book_service: AccountBookService, account_book: str | int) -> int:
    """Resolve account book name or ID to account book ID.

    Args:
        book_service: AccountBookService instance
        account_book: Account book name (str) or ID (int or numeric string)

    Returns:
        Account book ID

    Raises:
        ValueError: If account book is not found
    """
    book_id = _as_id(account_book)
    if book_id is not None:
        if book_service.get_account_book(book_id) is None:
            raise ValueError(f"Account book ID {book_id} not found")
        return book_id

    for book in book_service.list_account_books():
        if book.name == account_book:
            return book.id

    raise ValueError(f"Account book '{account_book}' not found")


def resolve_account(
    account_service: AccountService, account_book_id: int, account: str | int
) -> int:
    """Resolve account name or ID to account ID within an account book.

    Args:
        account_service: AccountService instance
        account_book_id: Account book the account must belong to
        account: Account name (str) or ID (int or numeric string)

    Returns:
        Account ID

    Raises:
        ValueError: If account is not found in the account book
    """
    account_id = _as_id(account)
    if account_id is not None:
        account_obj = account_service.get_account(account_id)
        if account_obj is None or account_obj.account_book_id != account_book_id:
            raise ValueError(f"Account ID {account_id} not found")
        return account_id

    for acc in account_service.list_accounts(account_book_id):
        if acc.name == account:
            return acc.id

    raise ValueError(f"Account '{account}' not found")

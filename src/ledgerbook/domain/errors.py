"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class EmptyImportError(ValidationError):
    """An import file contained no usable transactions."""


class QIFReadError(DomainError):
    """A QIF file could not be read from disk."""


class StorageError(DomainError):
    """The database rejected a write."""


def account_book_not_found(account_book_id: int) -> str:
    """Return message for missing account book."""
    return f"Account book {account_book_id} not found"


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def account_not_in_book(account_id: int, account_book_id: int) -> str:
    """Return message for an account that belongs to another account book."""
    return f"Account {account_id} does not belong to account book {account_book_id}"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def category_rule_not_found(rule_id: int) -> str:
    """Return message for missing category rule."""
    return f"Category rule {rule_id} not found"


def no_transactions_found() -> str:
    """Return message for a QIF file without usable records."""
    return "No transactions found in the QIF file."

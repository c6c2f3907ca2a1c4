"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so services never see ORM rows.
"""

from decimal import Decimal

from ledgerbook.domain import entities as domain
from ledgerbook.database.models import (
    AccountBook as ORMAccountBook,
    Account as ORMAccount,
    AccountMonthlyBalance as ORMAccountMonthlyBalance,
    Transaction as ORMTransaction,
    CategoryRule as ORMCategoryRule,
)


def _decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def account_book_to_domain(orm_book: ORMAccountBook) -> domain.AccountBook:
    """Convert SQLAlchemy AccountBook model to domain AccountBook entity."""
    return domain.AccountBook(
        id=orm_book.id,
        name=orm_book.name,
        created_at=orm_book.created_at,
        updated_at=orm_book.updated_at,
    )


def monthly_balance_to_domain(orm_entry: ORMAccountMonthlyBalance) -> domain.MonthlyBalance:
    """Convert a stored series entry to a domain MonthlyBalance."""
    return domain.MonthlyBalance(
        month=orm_entry.month,
        debits=_decimal(orm_entry.debits),
        credits=_decimal(orm_entry.credits),
        balance=_decimal(orm_entry.balance),
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        account_book_id=orm_account.account_book_id,
        total_monthly_balance=_decimal(orm_account.total_monthly_balance),
        total_monthly_debits=_decimal(orm_account.total_monthly_debits),
        total_monthly_credits=_decimal(orm_account.total_monthly_credits),
        created_at=orm_account.created_at,
        updated_at=orm_account.updated_at,
        historical_balance=tuple(
            monthly_balance_to_domain(entry)
            for entry in sorted(orm_account.monthly_balances, key=lambda e: e.month)
        ),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        account_book_id=orm_transaction.account_book_id,
        transaction_date=orm_transaction.transaction_date,
        description=orm_transaction.description,
        category=orm_transaction.category,
        sub_category=orm_transaction.sub_category or "",
        debit_amount=_decimal(orm_transaction.debit_amount),
        credit_amount=_decimal(orm_transaction.credit_amount),
        linked_transaction_id=orm_transaction.linked_transaction_id,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )


def category_rule_to_domain(orm_rule: ORMCategoryRule) -> domain.CategoryRule:
    """Convert SQLAlchemy CategoryRule model to domain CategoryRule entity."""
    return domain.CategoryRule(
        id=orm_rule.id,
        account_book_id=orm_rule.account_book_id,
        keyword=orm_rule.keyword,
        category=orm_rule.category,
        sub_category=orm_rule.sub_category or "",
        created_at=orm_rule.created_at,
        updated_at=orm_rule.updated_at,
    )

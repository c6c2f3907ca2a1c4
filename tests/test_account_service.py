"""Tests for account book and account services."""

import pytest
from datetime import date
from decimal import Decimal

from ledgerbook.domain.errors import NotFoundError, ValidationError


def _add(transaction_service, account, when, debit="0", credit="0", description="Test"):
    return transaction_service.create_transaction(
        account_id=account.id,
        account_book_id=account.account_book_id,
        transaction_date=when,
        description=description,
        debit_amount=Decimal(debit),
        credit_amount=Decimal(credit),
    )


class TestAccountBookService:
    def test_create_and_get(self, book_service):
        book_id = book_service.create_account_book("  Household  ")
        book = book_service.get_account_book(book_id)
        assert book.name == "Household"

    def test_create_requires_name(self, book_service):
        with pytest.raises(ValidationError, match="name is required"):
            book_service.create_account_book("   ")

    def test_list(self, book_service):
        book_service.create_account_book("One")
        book_service.create_account_book("Two")
        assert {b.name for b in book_service.list_account_books()} == {"One", "Two"}

    def test_require_missing(self, book_service):
        with pytest.raises(NotFoundError):
            book_service.require_account_book(999)

    def test_delete_cascades(
        self, book_service, account_service, transaction_service, rule_service, sample_book, sample_account
    ):
        _add(transaction_service, sample_account, date(2024, 1, 5), debit="10")
        rule_id = rule_service.create_rule(sample_book.id, "coles", "Groceries")

        book_service.delete_account_book(sample_book.id)

        assert book_service.get_account_book(sample_book.id) is None
        assert account_service.get_account(sample_account.id) is None
        assert transaction_service.list_transactions(account_book_id=sample_book.id) == []
        assert rule_service.db.get_category_rule(rule_id) is None

    def test_delete_missing(self, book_service):
        with pytest.raises(NotFoundError):
            book_service.delete_account_book(999)


class TestAccountService:
    def test_new_account_is_zeroed(self, sample_account):
        assert sample_account.name == "Everyday"
        assert sample_account.total_monthly_balance == Decimal("0")
        assert sample_account.total_monthly_debits == Decimal("0")
        assert sample_account.total_monthly_credits == Decimal("0")
        assert sample_account.historical_balance == ()

    def test_create_requires_existing_book(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.create_account(999, "Savings")

    def test_create_requires_name(self, account_service, sample_book):
        with pytest.raises(ValidationError):
            account_service.create_account(sample_book.id, "")

    def test_list_accounts_per_book(self, account_service, book_service, sample_book, sample_account):
        other_book = book_service.create_account_book("Business")
        account_service.create_account(other_book, "Cheque")

        accounts = account_service.list_accounts(sample_book.id)
        assert [a.name for a in accounts] == ["Everyday"]

    def test_require_account_in_other_book(self, account_service, book_service, sample_account):
        other_book = book_service.create_account_book("Business")
        with pytest.raises(ValidationError, match="does not belong"):
            account_service.require_account(sample_account.id, other_book)

    def test_require_missing_account(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.require_account(999)

    def test_delete_account_removes_transactions(self, account_service, transaction_service, sample_account):
        _add(transaction_service, sample_account, date(2024, 1, 5), debit="10")

        account_service.delete_account(sample_account.id)

        assert account_service.get_account(sample_account.id) is None
        assert transaction_service.list_transactions(account_id=sample_account.id) == []

    def test_delete_missing_account(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.delete_account(999)


class TestClearTransactions:
    @pytest.fixture
    def populated(self, transaction_service, sample_account):
        _add(transaction_service, sample_account, date(2024, 1, 10), debit="100")
        _add(transaction_service, sample_account, date(2024, 2, 1), credit="50")
        _add(transaction_service, sample_account, date(2024, 2, 29), debit="20")
        _add(transaction_service, sample_account, date(2024, 3, 1), credit="5")
        return sample_account

    def test_clear_month(self, account_service, transaction_service, populated):
        deleted = account_service.clear_month(populated.id, "2024-02")

        assert deleted == 2
        remaining = transaction_service.list_transactions(account_id=populated.id)
        assert [t.transaction_date for t in remaining] == [date(2024, 1, 10), date(2024, 3, 1)]

        account = account_service.get_account(populated.id)
        assert [e.month for e in account.historical_balance] == ["2024-01", "2024-03"]
        assert account.historical_balance[-1].balance == Decimal("-95")

    def test_clear_month_invalid(self, account_service, populated):
        with pytest.raises(ValueError):
            account_service.clear_month(populated.id, "2024-14")

    def test_clear_last_month(self, account_service, transaction_service, populated):
        deleted = account_service.clear_last_month(populated.id, today=date(2024, 3, 15))

        assert deleted == 2
        months = {t.month for t in transaction_service.list_transactions(account_id=populated.id)}
        assert months == {"2024-01", "2024-03"}

    def test_clear_all(self, account_service, transaction_service, populated):
        assert account_service.clear_all(populated.id) == 4

        assert transaction_service.list_transactions(account_id=populated.id) == []
        account = account_service.get_account(populated.id)
        assert account.historical_balance == ()
        assert account.total_monthly_balance == Decimal("0")

    def test_clear_empty_month(self, account_service, populated):
        assert account_service.clear_month(populated.id, "2023-06") == 0

    def test_clear_missing_account(self, account_service):
        with pytest.raises(NotFoundError):
            account_service.clear_all(999)

    def test_clear_leaves_other_accounts(self, account_service, transaction_service, populated):
        other_id = account_service.create_account(populated.account_book_id, "Savings")
        other = account_service.get_account(other_id)
        _add(transaction_service, other, date(2024, 2, 10), credit="1")

        account_service.clear_all(populated.id)

        assert len(transaction_service.list_transactions(account_id=other_id)) == 1

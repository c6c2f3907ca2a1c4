"""Shared pytest fixtures for ledgerbook tests."""

import logging
import tempfile
import os
from pathlib import Path
import pytest

from ledgerbook import logging_setup
from ledgerbook.database.factories import create_sqlite_database
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.account_book import AccountBookService
from ledgerbook.domain.category_rule import CategoryRuleService
from ledgerbook.domain.qif_import import QIFImportService
from ledgerbook.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() calls made by CLI invocations."""
    yield
    pkg_logger = logging.getLogger("ledgerbook")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
    logging_setup._CONFIGURED = False


@pytest.fixture
def book_service(temp_db):
    """Create an AccountBookService with a temporary database."""
    return AccountBookService(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def rule_service(temp_db):
    """Create a CategoryRuleService with a temporary database."""
    return CategoryRuleService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a QIFImportService with a temporary database."""
    return QIFImportService(temp_db)


@pytest.fixture
def sample_book(book_service):
    """Create a sample account book for testing."""
    book_id = book_service.create_account_book("Household")
    return book_service.get_account_book(book_id)


@pytest.fixture
def sample_account(account_service, sample_book):
    """Create a sample account in the sample account book."""
    account_id = account_service.create_account(sample_book.id, "Everyday")
    return account_service.get_account(account_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"

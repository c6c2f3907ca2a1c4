"""QIF import domain service."""

from pathlib import Path
from typing import Optional
from datetime import date

from ledgerbook.database.base import Database
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.aggregator import AccountAggregator
from ledgerbook.domain.entities import ImportResult
from ledgerbook.domain.errors import (
    EmptyImportError,
    NotFoundError,
    QIFReadError,
    StorageError,
    account_book_not_found,
    no_transactions_found,
)
from ledgerbook.domain.rule_matcher import categorize_draft
from ledgerbook.logging_setup import get_logger
from ledgerbook.utils.qif_parser import parse_qif_content

logger = get_logger(__name__)


class QIFImportService:
    """Service for importing QIF bank exports into an account."""

    def __init__(self, db: Database):
        """Initialize QIF import service.

        Args:
            db: Database instance
        """
        self.db = db
        self.account_service = AccountService(db)
        self.aggregator = AccountAggregator(db)

    def import_qif_file(
        self, qif_file_path: str, account_id: int, account_book_id: int
    ) -> ImportResult:
        """Import transactions from a QIF file on disk.

        Raises:
            QIFReadError: If the file cannot be read
            EmptyImportError: If the file holds no complete transactions
        """
        path = Path(qif_file_path)
        try:
            content = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise QIFReadError(f"Failed to read QIF file '{qif_file_path}': {e}")
        return self.import_qif_content(content, account_id, account_book_id)

    def import_qif_content(
        self,
        content: str,
        account_id: int,
        account_book_id: int,
        today: Optional[date] = None,
    ) -> ImportResult:
        """Import transactions from QIF text.

        Uncategorized records pick up the first matching category rule of
        the account book. Each transaction is stored on its own; a storage
        error stops the loop but keeps what was already stored. Account
        totals are recomputed once at the end.

        Args:
            content: QIF text
            account_id: Target account ID
            account_book_id: Account book ID owning the account
            today: Fallback for unrecognized dates (defaults to the system date)

        Returns:
            ImportResult with parsed/imported counts, stored transactions
            and storage errors

        Raises:
            NotFoundError: If account or account book doesn't exist
            ValidationError: If account belongs to another account book
            EmptyImportError: If the content holds no complete transactions
        """
        if self.db.get_account_book(account_book_id) is None:
            raise NotFoundError(account_book_not_found(account_book_id))
        self.account_service.require_account(account_id, account_book_id)

        drafts = parse_qif_content(content, today=today)
        if not drafts:
            raise EmptyImportError(no_transactions_found())

        logger.info("Importing %d transactions into account %s", len(drafts), account_id)
        rules = self.db.list_category_rules(account_book_id)
        result = ImportResult(parsed=len(drafts))

        for index, draft in enumerate(drafts, start=1):
            draft = categorize_draft(draft, rules)
            try:
                transaction = self.db.create_transaction(draft, account_id, account_book_id)
            except StorageError as e:
                logger.exception(
                    "Storing transaction %d of %d failed; %d stored before the error",
                    index,
                    len(drafts),
                    result.imported,
                )
                result.errors.append(f"Transaction {index} ({draft.description}): {e}")
                break
            result.transactions.append(transaction)
            result.imported += 1

        self.aggregator.recompute(account_id)
        logger.info(
            "Imported %d of %d transactions into account %s",
            result.imported,
            result.parsed,
            account_id,
        )
        return result

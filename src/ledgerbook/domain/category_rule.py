"""Category rule domain service."""

from collections import defaultdict
from typing import Optional
from ledgerbook.database.base import Database
from ledgerbook.domain.entities import CategoryRule
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_book_not_found,
    category_rule_not_found,
)
from ledgerbook.domain.rule_matcher import find_matching_rule, is_uncategorized
from ledgerbook.logging_setup import get_logger

logger = get_logger(__name__)


class CategoryRuleService:
    """Service for managing keyword rules and applying them."""

    def __init__(self, db: Database):
        """Initialize category rule service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_rule(
        self, account_book_id: int, keyword: str, category: str, sub_category: Optional[str] = None
    ) -> int:
        """Create a category rule.

        Args:
            account_book_id: Owning account book ID
            keyword: Text to look for in transaction descriptions
            category: Category assigned on match
            sub_category: Optional sub-category assigned on match

        Returns:
            Rule ID

        Raises:
            NotFoundError: If account book doesn't exist
            ValidationError: If keyword or category is blank
        """
        if self.db.get_account_book(account_book_id) is None:
            raise NotFoundError(account_book_not_found(account_book_id))
        keyword = (keyword or "").strip()
        category = (category or "").strip()
        if not keyword:
            raise ValidationError("Rule keyword is required")
        if not category:
            raise ValidationError("Rule category is required")
        return self.db.create_category_rule(
            account_book_id=account_book_id,
            keyword=keyword,
            category=category,
            sub_category=(sub_category or "").strip(),
        )

    def list_rules(self, account_book_id: int) -> list[CategoryRule]:
        """List an account book's rules in evaluation order."""
        return self.db.list_category_rules(account_book_id)

    def delete_rule(self, rule_id: int) -> None:
        """Delete a category rule.

        Raises:
            NotFoundError: If rule doesn't exist
        """
        if self.db.get_category_rule(rule_id) is None:
            raise NotFoundError(category_rule_not_found(rule_id))
        self.db.delete_category_rule(rule_id)

    def apply_rules_to_uncategorized(self, account_book_id: int) -> int:
        """Categorize every uncategorized transaction of an account book.

        Already categorized transactions are left alone. Updates are batched
        per matching rule.

        Returns:
            Number of transactions updated
        """
        rules = self.db.list_category_rules(account_book_id)
        if not rules:
            return 0

        matches: dict[int, list[int]] = defaultdict(list)
        rules_by_id = {rule.id: rule for rule in rules}
        for txn in self.db.list_transactions(account_book_id=account_book_id):
            if not is_uncategorized(txn.category):
                continue
            rule = find_matching_rule(txn.description, rules)
            if rule is not None:
                matches[rule.id].append(txn.id)

        updated = 0
        for rule_id, transaction_ids in matches.items():
            rule = rules_by_id[rule_id]
            updated += self.db.update_transactions_category(
                transaction_ids, rule.category, rule.sub_category
            )

        logger.info("Applied %d rules to account book %s: %d updated", len(rules), account_book_id, updated)
        return updated

"""Keyword rule matching for automatic categorization."""

from dataclasses import replace
from typing import Optional, Sequence

from ledgerbook.domain.entities import CategoryRule, TransactionDraft, UNCATEGORIZED


def is_uncategorized(category: Optional[str]) -> bool:
    """Return True when a category is empty or the "Uncategorized" default."""
    return not category or category.lower() == UNCATEGORIZED.lower()


def find_matching_rule(
    description: Optional[str], rules: Sequence[CategoryRule]
) -> Optional[CategoryRule]:
    """Return the first rule whose keyword occurs in the description.

    Matching is a case-insensitive substring test. Rules are tried in the
    order given (creation order), so the earliest created rule wins.
    """
    description_lc = (description or "").lower()
    for rule in rules:
        if rule.keyword.lower() in description_lc:
            return rule
    return None


def categorize_draft(draft: TransactionDraft, rules: Sequence[CategoryRule]) -> TransactionDraft:
    """Apply the first matching rule to an uncategorized draft.

    Drafts that already carry a category are returned unchanged.
    """
    if not is_uncategorized(draft.category):
        return draft
    rule = find_matching_rule(draft.description, rules)
    if rule is None:
        return draft
    return replace(draft, category=rule.category, sub_category=rule.sub_category or "")

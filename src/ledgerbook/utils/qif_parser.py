"""QIF (Quicken Interchange Format) parsing.

A QIF export is line oriented. Each line starts with a one letter field code
and records end with a ``^`` line::

    !Type:Bank
    D13/01/2024
    T-42.50
    PCOLES 123 SYDNEY
    LGroceries
    ^

Incomplete records (no date or no description) are dropped silently.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ledgerbook.domain.entities import TransactionDraft, UNCATEGORIZED, ZERO
from ledgerbook.utils.amount_parser import parse_qif_amount
from ledgerbook.utils.date_parser import normalize_qif_date


def _amount_fields(amount: Decimal) -> dict[str, Decimal]:
    if amount > 0:
        return {"credit_amount": amount, "debit_amount": ZERO}
    return {"debit_amount": abs(amount), "credit_amount": ZERO}


def _build_draft(fields: dict[str, Any]) -> Optional[TransactionDraft]:
    """Turn the accumulated fields of one record into a draft, if complete."""
    if not fields.get("transaction_date") or not fields.get("description"):
        return None
    return TransactionDraft(
        transaction_date=fields["transaction_date"],
        description=fields["description"],
        category=fields.get("category") or UNCATEGORIZED,
        sub_category=fields.get("sub_category") or "",
        debit_amount=fields.get("debit_amount") or ZERO,
        credit_amount=fields.get("credit_amount") or ZERO,
        linked_transaction_id=fields.get("linked_transaction_id"),
    )


def parse_qif_content(content: str, today: Optional[date] = None) -> list[TransactionDraft]:
    """Parse QIF text into transaction drafts, in file order.

    Args:
        content: Full text of the QIF file
        today: Fallback for unrecognized dates (defaults to the system date)

    Returns:
        List of transaction drafts
    """
    drafts: list[TransactionDraft] = []
    current: dict[str, Any] = {}

    for raw_line in content.split("\n"):
        line = raw_line.strip()

        if line.startswith("!Type:"):
            current = {}
            continue

        if line.startswith("^"):
            draft = _build_draft(current)
            if draft is not None:
                drafts.append(draft)
            current = {}
            continue

        code, value = line[:1], line[1:]
        if code == "D":
            current["transaction_date"] = normalize_qif_date(value, today=today)
        elif code == "T":
            current.update(_amount_fields(parse_qif_amount(value)))
        elif code == "P":
            current["description"] = value
        elif code == "L":
            current["category"] = value
        elif code == "S":
            current["sub_category"] = value
        elif code == "M":
            # Memo only stands in for a missing payee
            if not current.get("description"):
                current["description"] = value

    # File may end without a trailing ^
    draft = _build_draft(current)
    if draft is not None:
        drafts.append(draft)

    return drafts

"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_QIF_AMOUNT_NOISE = re.compile(r"[^\d.-]")
_LEADING_NUMBER = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount


def parse_qif_amount(amount_str: str) -> Decimal:
    """Parse a QIF ``T`` field into a signed Decimal.

    Everything except digits, ``.`` and ``-`` is dropped, then the leading
    number is read ("1,234.56" is 1234.56, "$-12.00" is -12.00). Text with
    no leading number is zero. Never raises.
    """
    cleaned = _QIF_AMOUNT_NOISE.sub("", amount_str)
    m = _LEADING_NUMBER.match(cleaned)
    if not m:
        return Decimal("0")
    return Decimal(m.group(0))

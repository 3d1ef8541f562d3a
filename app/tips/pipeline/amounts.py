"""
Tip amount extraction.

Only amounts carrying a tip label count; bare dollar figures are ignored.
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

_CENTS = Decimal("0.01")

TIP_AMOUNT = re.compile(
    r"\b(?:gratuity|grat|tip(?:\s+amount)?)\b"
    r"\s*(?:[:.=]\s*)?"
    r"(?:\$\s*)?"
    r"(\d{1,3}(?:,\d{3})+|\d+)\.(\d{2})(?!\d)",
    re.IGNORECASE,
)


def _to_amount(whole: str, cents: str) -> Optional[str]:
    try:
        value = Decimal(f"{whole.replace(',', '')}.{cents}")
    except InvalidOperation:
        return None
    if value.is_nan() or value <= 0:
        return None
    return str(value.quantize(_CENTS))


def find_tip_amount(section: str) -> Optional[str]:
    """Return the tip amount stated in *section* as text, e.g. ``"12.50"``.

    When several tip lines are present the last one wins, since receipts
    restate figures towards the bottom. Zero or unparseable amounts are skipped
    in favour of the previous match.
    """
    matches = list(TIP_AMOUNT.finditer(section))
    for match in reversed(matches):
        amount = _to_amount(match.group(1), match.group(2))
        if amount is not None:
            return amount
    return None

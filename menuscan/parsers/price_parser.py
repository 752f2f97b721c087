"""
Price Parser — price tokens in layout-free OCR text.

One grammar is used both to cut the OCR ribbon into pseudo-lines and to pull
(label, price) pairs out of each line:

    [$€£]? 1-3 digits [3-digit thousands group]? ([.,] 1-2 digits)? [$€£]?

never touching another digit on either side. "$34", "34$", "4.50", "2,50",
"€ 12" and "1150" all qualify.
"""

from __future__ import annotations

from typing import Optional
import re

CURRENCY_SYMBOLS = "$€£"

# Group 1: the whole token (with currency). Group 2: the number only.
PRICE_TOKEN_RE = re.compile(
    r"""
    (?<![0-9])
    (
      (?:[$€£]\s*)?                        # leading currency
      ([0-9]{1,3}(?:[0-9]{3})?             # integer part, optional thousands group
       (?:[.,][0-9]{1,2})?)                # decimal part
      (?:\s*[$€£])?                        # trailing currency
    )
    (?![0-9])
    """,
    re.VERBOSE,
)

_CURRENCY_RE = re.compile(r"([$€£])")
_NON_NUMERIC_RE = re.compile(r"[^0-9.]")


def pad_currency_symbols(text: str) -> str:
    """'€12' → ' € 12 ' so a glued symbol never hides the digits."""
    return _CURRENCY_RE.sub(r" \1 ", text)


def parse_price(token: str) -> Optional[float]:
    """Convert a price token to a number; None when nothing numeric survives."""
    if not token:
        return None
    cleaned = _NON_NUMERIC_RE.sub("", token.replace(",", ".", 1))
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None

"""
Best-effort numeric parsing of scraped label text.

Nothing here raises: missing or malformed text always resolves to 0.
"""

import re
from typing import Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_NON_DIGITS = re.compile(r"[^0-9]")


def parse_leading_int(text: Optional[str]) -> int:
    """
    Parse the integer at the start of a label.

    "45%" -> 45, "12.5¢" -> 12, "<1%" -> 0, None -> 0.
    """
    if not text:
        return 0
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return int(match.group(1))


def parse_digits(text: Optional[str]) -> int:
    """
    Concatenate every digit in a label.

    Used for volume labels such as "$1,234,567 Vol." -> 1234567.
    """
    if not text:
        return 0
    digits = _NON_DIGITS.sub("", text)
    return int(digits) if digits else 0


def clean_text(text: Optional[str], default: str = "") -> str:
    """Trim a label, falling back to default when it is missing or blank."""
    if text is None:
        return default
    text = text.strip()
    return text or default

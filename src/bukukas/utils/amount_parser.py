"""Amount parsing utilities."""

import re

# Whole amounts, optionally grouped in thousands by ".", "," or spaces.
_GROUPED = re.compile(r"^\d{1,3}(?:([.,\s])\d{3})?(?:\1\d{3})*$")


def parse_amount(amount_str: str) -> int:
    """Parse an amount string into a non-negative integer.

    Amounts are whole units of the smallest currency unit. Handles:
    - "150000"
    - "150.000" / "150,000" / "150 000"
    - "Rp 150.000" / "Rp150,000"

    Args:
        amount_str: Amount string

    Returns:
        Integer amount

    Raises:
        ValueError: If the amount is empty, negative, fractional or malformed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()
    if cleaned.lower().startswith("rp"):
        cleaned = cleaned[2:].lstrip(" .")

    if cleaned.startswith("-") or (cleaned.startswith("(") and cleaned.endswith(")")):
        raise ValueError(f"Amount must not be negative: '{amount_str}'")

    if cleaned.isdigit():
        return int(cleaned)

    if _GROUPED.match(cleaned):
        return int(re.sub(r"[.,\s]", "", cleaned))

    raise ValueError(
        f"Could not parse amount '{amount_str}': use a whole number such as 150000 or 150.000"
    )

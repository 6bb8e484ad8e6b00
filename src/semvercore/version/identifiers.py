import re
from typing import Optional

# Alternatives: zero, numeric without leading zero, letter-led, digit-led with a non-digit
IDENTIFIER_REGEX = re.compile(
    r"(?:0"
    r"|[1-9][0-9]*"
    r"|[A-Z][A-Z0-9-]*"
    r"|[0-9]+(?:[A-Z]|-(?!\Z))(?:[A-Z0-9]|-(?!\Z))*)",
    re.IGNORECASE | re.ASCII,
)

NUMERIC_REGEX = re.compile(r"[0-9]+", re.ASCII)


def validate(identifier: Optional[str]) -> bool:
    """
    Check that a single dot-segment identifier is valid.

    Dots are separators between identifiers and never part of one,
    so any identifier containing a dot is rejected.
    """
    if not isinstance(identifier, str):
        return False
    return IDENTIFIER_REGEX.fullmatch(identifier) is not None


def is_numeric(identifier: str) -> bool:
    """True when the identifier consists of ASCII digits only."""
    return NUMERIC_REGEX.fullmatch(identifier) is not None

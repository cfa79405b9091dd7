from __future__ import annotations

import re

# Outward code, single space, inward code. GIR 0AA is the Girobank special case.
_POSTCODE_RE = re.compile(
    r"^(?:GIR 0A{2}"
    r"|(?:[A-Z][0-9]{1,2}|[A-Z][A-HJ-Y][0-9]{1,2}|[A-Z][0-9][A-Z]|[A-Z][A-HJ-Y][0-9]?[A-Z])"
    r" [0-9][A-Z]{2})$",
    re.IGNORECASE,
)


def is_valid_postcode(postcode: str) -> bool:
    """True if ``postcode`` looks like a UK postcode (case-insensitive)."""
    return bool(_POSTCODE_RE.fullmatch(postcode))


def normalise_postcode(postcode: str) -> str:
    return postcode.replace(' ', '')

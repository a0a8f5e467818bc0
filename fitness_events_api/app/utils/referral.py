"""
Referral code helpers.

Referral codes travel through forms in a display form that includes
the referrer's name, e.g. ``"XYZAB - Kapil Bamotriya"``.  These helpers
convert between the bare code and that form.
"""

from typing import Optional

SEPARATOR = " - "


def extract_referral_code(formatted_code: Optional[str]) -> Optional[str]:
    """Return the bare code from ``"CODE - Name"``, or the input unchanged.

    Empty input yields ``None``.
    """
    if not formatted_code:
        return None
    if SEPARATOR in formatted_code:
        return formatted_code.split(SEPARATOR)[0].strip()
    return formatted_code


def format_referral_code(code: str, name: str) -> str:
    return f"{code}{SEPARATOR}{name}"

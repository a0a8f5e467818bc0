"""Mobile number normalization."""

import re

_NON_DIGITS = re.compile(r"\D")


def extract_last_10_digits(mobile_number: str) -> str:
    """Strip every non-digit character and keep the last 10 digits.

    Numbers are stored without country code, so ``"+91 98765-43210"``
    and ``"9876543210"`` resolve to the same user.  Shorter inputs are
    returned as their digits only.
    """
    digits_only = _NON_DIGITS.sub("", mobile_number)
    return digits_only[-10:]

"""
Report which environment variables the API needs are set.

Secrets are printed masked so the output can be pasted into a support
ticket.

Usage:
    fitness-check-env
"""

import os
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv

# (variable, is_secret)
CHECKED_VARIABLES: List[Tuple[str, bool]] = [
    ("DATABASE_URL", False),
    ("API_KEY", True),
    ("ADMIN_USERNAME", False),
    ("ADMIN_PASSWORD", True),
    ("ADMIN_JWT_SECRET", True),
    ("RAZORPAY_KEY_ID", False),
    ("RAZORPAY_KEY_SECRET", True),
    ("GOOGLE_CLIENT_ID", False),
    ("GOOGLE_CLIENT_SECRET", True),
]


def mask_secret(value: str) -> str:
    """Keep the first and last 4 characters, star the rest.

    Values of 8 characters or fewer are starred completely.
    """
    if len(value) <= 8:
        return "*" * len(value)
    return value[:4] + "*" * (len(value) - 8) + value[-4:]


def check_environment(environ: Optional[Dict[str, str]] = None) -> List[Tuple[str, bool, Optional[str]]]:
    """Return ``(name, is_set, display_value)`` for every checked variable."""
    env = os.environ if environ is None else environ
    report = []
    for name, is_secret in CHECKED_VARIABLES:
        value = env.get(name)
        if not value:
            report.append((name, False, None))
            continue
        report.append((name, True, mask_secret(value) if is_secret else value))
    return report


def main() -> None:
    load_dotenv()
    print("Environment Variables Check:")
    print("-" * 50)
    for name, is_set, display in check_environment():
        line = f"{name} exists: {'YES' if is_set else 'NO'}"
        if display is not None:
            line += f" ({display})"
        print(line)
    print("-" * 50)


if __name__ == "__main__":
    main()

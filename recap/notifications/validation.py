"""
Recipient address checks shared by the dispatcher and the client.
"""

import re
from typing import Iterable, List

# local@domain.tld with no whitespace or comma and a single @ per part
EMAIL_PATTERN = re.compile(r"^[^\s@,]+@[^\s@,]+\.[^\s@,]+$")


def is_email(value: str) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def find_invalid_recipients(recipients: Iterable[str]) -> List[str]:
    """Return every recipient that fails the syntax check, in input order."""
    return [r for r in recipients if not is_email(r)]

"""
Field validators shared by the create, update and search paths.

All functions are pure predicates: they never raise, they only answer
whether a value is acceptable. Callers pick the error message.
"""

import re
import unicodedata
from datetime import date

NAME_PUNCTUATION = frozenset(" .'-")
EMAIL_PATTERN = re.compile(r"[\w.-]+@[\w.-]+\.[a-zA-Z]{2,}", re.ASCII)
EMAIL_FRAGMENT_PATTERN = re.compile(r"[\w.@-]+", re.ASCII)


def is_blank(value: str | None) -> bool:
    """Return True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


def _is_name_char(char: str) -> bool:
    return char in NAME_PUNCTUATION or unicodedata.category(char).startswith("L")


def is_valid_name(value: str | None) -> bool:
    """
    Check a first or last name.

    Only Unicode letters (categories L*), space, period, apostrophe and
    hyphen are allowed. Digits of any kind, including superscripts and
    Roman numerals, are rejected.
    """
    if is_blank(value):
        return False
    return all(_is_name_char(char) for char in value)


def is_valid_email(value: str | None) -> bool:
    """Check a complete ``local@domain.tld`` address."""
    if is_blank(value):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_email_fragment(value: str | None) -> bool:
    """
    Check a fragment used for substring search.

    Looser than ``is_valid_email``: any run of word characters, ``.``,
    ``@`` and ``-`` is accepted.
    """
    if is_blank(value):
        return False
    return EMAIL_FRAGMENT_PATTERN.fullmatch(value) is not None


def is_not_future(value: date, today: date | None = None) -> bool:
    """
    Check that a date is not after today.

    Args:
        value: Date to check
        today: Reference day, defaults to ``date.today()``

    Returns:
        True for today and any earlier day
    """
    if today is None:
        today = date.today()
    return value <= today

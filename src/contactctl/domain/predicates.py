"""String predicates used to gate field construction.

A predicate is any ``str -> bool`` callable. Bounds are baked into the
predicate, never into the field types it guards.
"""

from __future__ import annotations

import re
from collections.abc import Callable

type Predicate = Callable[[str], bool]

# user@domain.tld, deliberately loose
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def in_between(min_length: int, max_length: int) -> Predicate:
    """Build a predicate accepting text whose length is within the inclusive bounds.

    Examples:
        >>> in_between(1, 3)("ab")
        True
        >>> in_between(1, 3)("")
        False
    """
    if min_length > max_length:
        msg = f"min_length {min_length} exceeds max_length {max_length}"
        raise ValueError(msg)

    def _predicate(text: str) -> bool:
        return min_length <= len(text) <= max_length

    return _predicate


def non_empty(text: str) -> bool:
    """Accept any non-empty string."""
    return text != ""


def should_be_email(text: str) -> bool:
    """Accept text shaped like an email address."""
    return EMAIL_PATTERN.match(text) is not None

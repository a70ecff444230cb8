"""
Naming grammar for person records.

A name must start with a capital Latin letter, continue with Latin
letters, digits, spaces, '.' or '-', and be at most 50 characters long.
Validation never raises: it returns a NameValidation outcome that the
application layer turns into an error when needed.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

NAME_PATTERN = re.compile(r"[A-Z][A-Za-z0-9 .\-]*")
NAME_MAX_LENGTH = 50


class NameViolation(Enum):
    """Reasons a candidate name is rejected, with their client-facing text."""

    EMPTY = "Invalid name! The name must not be empty!"
    BAD_GRAMMAR = (
        "Invalid name! The name must contain Latin characters, "
        "numbers, signs '-', '.' and start with a capital letter!"
    )
    TOO_LONG = (
        f"Invalid name! The name must be no longer than {NAME_MAX_LENGTH} characters!"
    )

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class NameValidation:
    """Outcome of validating a name: valid, or invalid with a violation."""

    violation: Optional[NameViolation] = None

    @property
    def is_valid(self) -> bool:
        return self.violation is None


VALID = NameValidation()


def validate_name(name: str) -> NameValidation:
    """Check a candidate name against the naming grammar.

    Rules are checked in a fixed order and the first failing rule wins:
    emptiness, then the character grammar, then the length limit. A long
    name made of legal characters is therefore TOO_LONG, while a long name
    containing an illegal character is BAD_GRAMMAR.

    Args:
        name: The candidate name.

    Returns:
        VALID, or a NameValidation carrying the first violated rule.
    """
    if not name:
        return NameValidation(NameViolation.EMPTY)
    if NAME_PATTERN.fullmatch(name) is None:
        return NameValidation(NameViolation.BAD_GRAMMAR)
    if len(name) > NAME_MAX_LENGTH:
        return NameValidation(NameViolation.TOO_LONG)
    return VALID

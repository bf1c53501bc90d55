# SPDX-License-Identifier: MIT
"""Leading-zero detection for dotted numeric fields.

A NumChecker is fed one character at a time and tracks whether the current
field is numeric, and whether that numeric run started with a zero. A digit
following a lone ``0`` is rejected, which is how ``1.02`` is told apart from
``1.0`` and ``1.20``.
"""

from __future__ import annotations

from enum import Enum


class NumState(Enum):
    """Position of a NumChecker within the current field."""

    START = "start"
    NOT_NUMERIC = "not-numeric"
    ZERO = "zero"
    OTHER_NUMERIC = "other-numeric"


def is_digit(char: str) -> bool:
    """Return True for the ASCII digits only."""
    return len(char) == 1 and "0" <= char <= "9"


class NumChecker:
    """State machine classifying the characters of a version field."""

    __slots__ = ("state",)

    def __init__(self) -> None:
        self.state = NumState.START

    def __repr__(self) -> str:
        return f"NumChecker({self.state.name})"

    def reset(self) -> None:
        """Go back to the start of a field."""
        self.state = NumState.START

    def numeric(self) -> bool:
        """Return True while inside a run of digits."""
        return self.state in (NumState.ZERO, NumState.OTHER_NUMERIC)

    def check(self, char: str) -> bool:
        """Feed one character.

        Returns:
            False if the character is a digit following a lone zero (the
            state is left untouched), True otherwise.
        """
        if self.state is NumState.ZERO:
            if is_digit(char):
                return False
            self.state = NumState.NOT_NUMERIC
        elif self.state is NumState.OTHER_NUMERIC:
            if not is_digit(char):
                self.state = NumState.NOT_NUMERIC
        elif char == "0":
            self.state = NumState.ZERO
        elif is_digit(char):
            self.state = NumState.OTHER_NUMERIC
        else:
            self.state = NumState.NOT_NUMERIC
        return True


def all_checks(text: str) -> bool:
    """Return True if no numeric run in ``text`` has a leading zero.

    Examples:
        >>> all_checks("test123yes456")
        True
        >>> all_checks("test0123yes456")
        False
    """
    checker = NumChecker()
    return all(checker.check(char) for char in text)

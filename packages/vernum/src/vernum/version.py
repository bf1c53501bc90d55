# SPDX-License-Identifier: MIT
"""Version value types.

Version accepts the characters Debian allows in a version string
(``a-z``, ``0-9``, ``+``, ``-``, ``~``, ``.`` and the ``:`` of an epoch) and
orders them following Debian's rules. SimpleVersion narrows that down to
dotted numbers, which mean the same thing in every versioning scheme.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .cmp import INVALID, compare_text, priority, split_epoch, text_key
from .numcheck import NumChecker


class InvalidVersion(Enum):
    """Why a string was rejected as a version."""

    INVALID_CHARACTER = "invalid-character"
    LEADING_ZERO = "leading-zero"


class InvalidVersionError(Exception):
    """Raised when a string cannot be used as a version."""

    def __init__(self, version: Any, kind: InvalidVersion, message: str = ""):
        self.version = version
        self.kind = kind
        self.message = message or f"Invalid version ({kind.value}): {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, eq=False)
class Version:
    """A version number, ordered following Debian's rules.

    Equality follows the ordering rather than the text, so
    ``Version("1.01") == Version("1.1")``.

    Attributes:
        text: The version string as given
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidVersionError(
                self.text,
                InvalidVersion.INVALID_CHARACTER,
                f"Version must be a string, got {type(self.text).__name__}",
            )
        for char in self.text:
            if priority(char) == INVALID:
                raise InvalidVersionError(
                    self.text,
                    InvalidVersion.INVALID_CHARACTER,
                    f"Invalid character {char!r} in version {self.text!r}",
                )

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"

    def __hash__(self) -> int:
        return hash(text_key(self.text))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_text(self.text, other.text) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_text(self.text, other.text) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_text(self.text, other.text) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_text(self.text, other.text) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_text(self.text, other.text) >= 0

    @classmethod
    def _trusted(cls, text: str) -> "Version":
        """Build a Version from text known to be valid, skipping validation."""
        version = cls.__new__(cls)
        object.__setattr__(version, "text", text)
        return version

    @property
    def epoch(self) -> int:
        """Return the epoch, 0 when there is none."""
        return split_epoch(self.text)[0]


class SimpleVersion(Version):
    """A version made of dot-separated numbers only, such as ``1.20.3``.

    Fields may not be empty or start with a zero.
    """

    def __post_init__(self) -> None:
        super().__post_init__()
        for field in self.text.split("."):
            if not field or not field.isdigit():
                raise InvalidVersionError(
                    self.text,
                    InvalidVersion.INVALID_CHARACTER,
                    f"Not a simple version: {self.text!r}",
                )
            checker = NumChecker()
            if not all(checker.check(char) for char in field):
                raise InvalidVersionError(self.text, InvalidVersion.LEADING_ZERO)

    @property
    def fields(self) -> tuple[int, ...]:
        """Return the numeric fields."""
        return tuple(int(field) for field in self.text.split("."))


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Raises:
        InvalidVersionError: If the string contains characters a version
            cannot hold

    Examples:
        >>> parse_version("1.2~rc1") < parse_version("1.2")
        True
    """
    return Version(version_string)


def is_valid_version(version_string: str) -> bool:
    """Check if a string can be used as a Version."""
    try:
        Version(version_string)
    except InvalidVersionError:
        return False
    return True

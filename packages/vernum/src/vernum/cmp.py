# SPDX-License-Identifier: MIT
"""Debian-style ordering of version strings.

The epoch (a leading all-digit run before ``:``) is compared first. The rest
of the text is split into alternating runs of non-digits and digits.
Non-digit runs are compared character by character using CHAR_ORDER, digit
runs are compared by value:

- All the letters sort earlier than all non-letters
- Tilde sorts before anything, including the end of the string

For example, the following strings are in sorted order: ``"~~"``, ``"~~a"``,
``""``, ``"a"``.

See https://www.debian.org/doc/debian-policy/ch-controlfields.html#version
"""

from __future__ import annotations

from itertools import zip_longest
from string import ascii_lowercase, digits
from typing import Iterator, Union

from .numcheck import is_digit

# Rank of characters that may not appear in a version
INVALID = 255

# Digit runs larger than an unsigned 64-bit integer compare as zero
NUMERIC_MAX = 2**64 - 1


def _build_char_order() -> tuple[int, ...]:
    order = [INVALID] * 256
    for rank, char in enumerate("~" + ascii_lowercase + "+-" + digits + ".:"):
        order[ord(char)] = rank
    return tuple(order)


CHAR_ORDER = _build_char_order()


def priority(char: Union[str, int]) -> int:
    """Return the sort rank of a character, or INVALID.

    Args:
        char: A one-character string or a byte value
    """
    code = char if isinstance(char, int) else ord(char)
    if 0 <= code < len(CHAR_ORDER):
        return CHAR_ORDER[code]
    return INVALID


def compare_alpha(a: str, b: str) -> int:
    """Compare two non-digit runs.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b

    Examples:
        >>> compare_alpha("te", "test")
        -1
        >>> compare_alpha("te~", "te")
        -1
        >>> compare_alpha("test", "te5t")
        -1
    """
    for ca, cb in zip(a, b):
        pa, pb = priority(ca), priority(cb)
        if pa != pb:
            return -1 if pa < pb else 1

    if len(a) == len(b):
        return 0
    # The longer run is greater, unless a tilde comes next
    if len(a) < len(b):
        return 1 if b[len(a)] == "~" else -1
    return -1 if a[len(b)] == "~" else 1


def parse_numeric(run: str) -> int:
    """Parse a digit run, with the empty run and overflows reading as 0."""
    if not run:
        return 0
    value = int(run)
    if value > NUMERIC_MAX:
        return 0
    return value


def split_epoch(text: str) -> tuple[int, str]:
    """Split ``N:rest`` into ``(N, rest)``.

    Text without a leading all-digit epoch has epoch 0 and is returned whole.
    """
    head, sep, tail = text.partition(":")
    if sep and head and all(is_digit(char) for char in head):
        return parse_numeric(head), tail
    return 0, text


def segments(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(non-digit run, numeric value)`` pairs of ``text``."""
    pos = 0
    end = len(text)
    while pos < end:
        start = pos
        while pos < end and not is_digit(text[pos]):
            pos += 1
        alpha = text[start:pos]
        start = pos
        while pos < end and is_digit(text[pos]):
            pos += 1
        yield alpha, parse_numeric(text[start:pos])


def compare_part(a: str, b: str) -> int:
    """Compare two epoch-less version strings run by run."""
    for (alpha_a, num_a), (alpha_b, num_b) in zip_longest(
        segments(a), segments(b), fillvalue=("", 0)
    ):
        result = compare_alpha(alpha_a, alpha_b)
        if result:
            return result
        if num_a != num_b:
            return -1 if num_a < num_b else 1
    return 0


def compare_text(a: str, b: str) -> int:
    """Compare two version strings: epoch first, then the rest of the text.

    Hyphens are ordinary characters here; the Debian revision is not split
    off. Strings are not validated; see vernum.version.Version.
    """
    epoch_a, rest_a = split_epoch(a)
    epoch_b, rest_b = split_epoch(b)
    if epoch_a != epoch_b:
        return -1 if epoch_a < epoch_b else 1
    return compare_part(rest_a, rest_b)


def text_key(text: str) -> tuple:
    """Return a hashable key equal for exactly the strings compare_text equates."""
    epoch, rest = split_epoch(text)
    parts = list(segments(rest))
    # Only the first segment can be ("", 0), which equals the empty string
    while parts and parts[-1] == ("", 0):
        parts.pop()
    return (epoch, tuple(parts))

# SPDX-License-Identifier: MIT
"""Version comparison for strings and Version objects.

Ordering: epoch, then alternating non-digit and digit runs.
Pre-release (``~``) < release < post-release (``-``, ``+``, ``.``).
"""

from __future__ import annotations

from typing import Union

from .cmp import compare_text, text_key
from .version import Version, parse_version


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions following Debian ordering.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.2", "1.2.0")
        -1
        >>> compare_versions("1.01", "1.1")
        0
        >>> compare_versions("1.1-fix1", "1.1")
        1
        >>> compare_versions("1.1~rc1", "1.1")
        -1
    """
    return compare_text(_as_version(version1).text, _as_version(version2).text)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a key that is equal for versions that compare equal.

    The key is hashable but its own ordering does not follow version
    ordering; sort with ``key=parse_version`` or
    ``functools.cmp_to_key(compare_versions)`` instead.

    Examples:
        >>> version_key("1.01") == version_key("1.1")
        True
    """
    return text_key(_as_version(version).text)

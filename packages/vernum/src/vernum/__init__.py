# SPDX-License-Identifier: MIT
"""Version ordering and conversion between versioning schemes.

Versions are ordered following Debian's rules, which accept almost any
version string found in the wild, and can be converted to and from semantic
versions (https://semver.org/) and, partially, Python's PEP 440.

Example:
    >>> from vernum import Version, compare_versions, to_semver
    >>>
    >>> Version("1.2~rc1") < Version("1.2") < Version("1.2-1")
    True
    >>> compare_versions("1.2", "1.2.0")
    -1
    >>> str(to_semver("1.2~rc1"))
    '1.2.0-rc.1'
"""

__version__ = "0.1.0"

from .version import (
    Version,
    SimpleVersion,
    parse_version,
    is_valid_version,
    InvalidVersion,
    InvalidVersionError,
)
from .compare import (
    compare_versions,
    version_key,
)
from .semver import (
    SemverVersion,
    SemverErrorKind,
    ToSemverError,
    to_semver,
    to_semver_lossy,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .debian import DebianVersion
from .python import PythonVersion

__all__ = [
    # Version types
    "Version",
    "SimpleVersion",
    "DebianVersion",
    "PythonVersion",
    "parse_version",
    "is_valid_version",
    "InvalidVersion",
    "InvalidVersionError",
    # Version comparison
    "compare_versions",
    "version_key",
    # Semver conversion
    "SemverVersion",
    "SemverErrorKind",
    "ToSemverError",
    "to_semver",
    "to_semver_lossy",
    "is_valid_semver",
    "SEMVER_PATTERN",
]

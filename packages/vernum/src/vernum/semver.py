# SPDX-License-Identifier: MIT
"""Conversion between Debian-style versions and Semantic Versioning.

Semver (https://semver.org/) requires exactly three numeric fields, treats
everything after a dash as a pre-release, and has no epochs or
post-releases. Conversion therefore works for versions with at most three
fields, no post-release and a zero epoch:

- ``1.2`` -> ``1.2.0``
- ``1.2.4~rc1`` -> ``1.2.4-rc.1``
- ``0:1.2.3`` -> ``1.2.3``

to_semver_lossy() encodes what semver cannot express in build metadata,
which semver ignores when ordering:

- ``+epoch.N`` for a non-zero epoch
- ``+patch.<fields>`` for the fields after the third
- ``+post.<identifiers>`` for everything after the first ``-``
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .numcheck import NumChecker, NumState, is_digit
from .version import InvalidVersion, InvalidVersionError, Version

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

# Build metadata tags used by to_semver_lossy()
EPOCH_TAG = "epoch"
EXTRA_FIELDS_TAG = "patch"
POST_RELEASE_TAG = "post"

_IDENTIFIER = re.compile(r"[0-9]+|[a-z]+")
_DIGIT_RUN = re.compile(r"[0-9]+")
_EXTRA_FIELD = re.compile(r"[0-9a-z]+")


class SemverErrorKind(Enum):
    """Why a version cannot be expressed in semver."""

    HAS_EPOCH = "has-epoch"
    HAS_POST = "has-post"
    TOO_MANY_FIELDS = "too-many-fields"
    LEADING_ZERO = "leading-zero"
    INVALID_CHARACTER = "invalid-character"


class ToSemverError(Exception):
    """Raised when a version cannot be converted to semver."""

    def __init__(self, version: str, kind: SemverErrorKind, message: str = ""):
        self.version = version
        self.kind = kind
        self.message = message or f"Cannot convert {version!r} to semver: {kind.value}"
        super().__init__(self.message)


@dataclass(frozen=True)
class SemverVersion:
    """A version string following semver.org's grammar.

    Only produced by to_semver() and to_semver_lossy().
    """

    text: str

    def __str__(self) -> str:
        return self.text

    def _group(self, name: str) -> Optional[str]:
        return SEMVER_PATTERN.match(self.text).group(name)

    @property
    def major(self) -> int:
        return int(self._group("major"))

    @property
    def minor(self) -> int:
        return int(self._group("minor"))

    @property
    def patch(self) -> int:
        return int(self._group("patch"))

    @property
    def prerelease(self) -> Optional[str]:
        """Return the pre-release identifiers, e.g. ``"rc.1"``."""
        return self._group("prerelease")

    @property
    def build(self) -> Optional[str]:
        """Return the build metadata, e.g. ``"patch.4"``."""
        return self._group("buildmetadata")

    def to_version(self) -> Version:
        """Return the equivalent Version, with ``-`` rewritten to ``~``."""
        return Version._trusted(self.text.replace("-", "~"))


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.match(version_string) is not None


def _fail(text: str, kind: SemverErrorKind) -> ToSemverError:
    logger.debug("Rejecting %r for semver conversion: %s", text, kind.value)
    return ToSemverError(text, kind)


def _convert(text: str) -> str:
    # Fields 0 to 2 are major.minor.patch, 3 and up are in the pre-release
    field = 0
    num_check = NumChecker()
    out: list[str] = []
    read_epoch = False
    for char in text:
        if is_digit(char):
            if num_check.state is NumState.NOT_NUMERIC:
                out.append(".")
                num_check.reset()
            out.append(char)
            if not num_check.check(char):
                raise _fail(text, SemverErrorKind.LEADING_ZERO)
        elif char == ".":
            if num_check.state is NumState.START:
                # Empty field
                raise _fail(text, SemverErrorKind.INVALID_CHARACTER)
            if field == 2:
                raise _fail(text, SemverErrorKind.TOO_MANY_FIELDS)
            out.append(char)
            field += 1
            num_check.reset()
        elif char == "~":
            if num_check.state is NumState.START:
                raise _fail(text, SemverErrorKind.INVALID_CHARACTER)
            out.extend(".0" for _ in range(field, 2))
            out.append("-")
            field = 3
            num_check.reset()
        elif char == ":" and field == 0 and not read_epoch and out:
            if "".join(out) != "0":
                raise _fail(text, SemverErrorKind.HAS_EPOCH)
            out.clear()
            read_epoch = True
            num_check.reset()
        elif char == "-" and num_check.state is not NumState.START:
            raise _fail(text, SemverErrorKind.HAS_POST)
        elif "a" <= char <= "z":
            if field < 3:
                # Letters are only allowed in the pre-release
                raise _fail(text, SemverErrorKind.INVALID_CHARACTER)
            if num_check.numeric():
                out.append(".")
                num_check.reset()
            out.append(char)
            num_check.check(char)
        else:
            raise _fail(text, SemverErrorKind.INVALID_CHARACTER)

    if num_check.state is NumState.START:
        raise _fail(text, SemverErrorKind.INVALID_CHARACTER)
    out.extend(".0" for _ in range(field, 2))
    return "".join(out)


def _text(version: Union[str, Version]) -> str:
    if isinstance(version, Version):
        return version.text
    if not isinstance(version, str):
        raise InvalidVersionError(
            version,
            InvalidVersion.INVALID_CHARACTER,
            f"Version must be a string or Version, got {type(version).__name__}",
        )
    return version


def to_semver(version: Union[str, Version]) -> SemverVersion:
    """Convert a version to a semantic version.

    Works if the version has at most three fields, and no post-release or
    non-zero epoch.

    Raises:
        ToSemverError: If the version has no semver equivalent
        InvalidVersionError: If given neither a string nor a Version

    Examples:
        >>> str(to_semver("1.2"))
        '1.2.0'
        >>> str(to_semver("1.2~0ubuntu3"))
        '1.2.0-0.ubuntu.3'
    """
    return SemverVersion(_convert(_text(version)))


def _identifiers(text: str) -> list[str]:
    return [
        str(int(ident)) if is_digit(ident[0]) else ident for ident in _IDENTIFIER.findall(text)
    ]


def _strip_leading_zeros(text: str) -> str:
    return _DIGIT_RUN.sub(lambda match: str(int(match.group())), text)


def to_semver_lossy(version: Union[str, Version]) -> SemverVersion:
    """Convert a version to a semantic version, moving what semver lacks.

    Epochs, fields past the third and post-releases are kept as build
    metadata; leading zeros are dropped. Versions accepted by to_semver()
    convert identically.

    Raises:
        ToSemverError: If what remains after folding is still not
            expressible in semver, e.g. INVALID_CHARACTER for ``1.2+dfsg``

    Examples:
        >>> str(to_semver_lossy("1.2.3.1"))
        '1.2.3+patch.1'
        >>> str(to_semver_lossy("2:1.2.2"))
        '1.2.2+epoch.2'
    """
    text = _text(version)
    try:
        return SemverVersion(_convert(text))
    except ToSemverError as exc:
        if exc.kind is SemverErrorKind.INVALID_CHARACTER:
            raise

    build: list[str] = []
    rest = text
    head, sep, tail = rest.partition(":")
    if sep:
        if not head or not all(is_digit(char) for char in head):
            raise _fail(text, SemverErrorKind.INVALID_CHARACTER)
        if int(head):
            build += [EPOCH_TAG, str(int(head))]
        rest = tail

    rest, sep, post = rest.partition("-")
    main, tilde, pre = rest.partition("~")
    fields = main.split(".")
    if len(fields) > 3:
        if not all(_EXTRA_FIELD.fullmatch(extra) for extra in fields[3:]):
            raise _fail(text, SemverErrorKind.INVALID_CHARACTER)
        build += [EXTRA_FIELDS_TAG] + _identifiers(".".join(fields[3:]))
        main = ".".join(fields[:3])
    if sep:
        post_ids = _identifiers(post)
        if post_ids:
            build += [POST_RELEASE_TAG] + post_ids

    try:
        core = _convert(_strip_leading_zeros(main + tilde + pre))
    except ToSemverError as exc:
        raise ToSemverError(text, exc.kind) from exc
    if build:
        core += "+" + ".".join(build)
    logger.debug("Lossy semver conversion of %r gave %r", text, core)
    return SemverVersion(core)

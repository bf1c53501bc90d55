# SPDX-License-Identifier: MIT
"""Python (PEP 440) versions.

PEP 440 allows epochs (``N!``), pre-releases (``aN``, ``bN``, ``rcN``),
post-releases (``.postN``), development releases (``.devN``) and local
labels (``+label``). Parsing is left to the ``packaging`` library; this
module maps the parsed parts onto a Version that sorts the same way.
"""

from __future__ import annotations

from dataclasses import dataclass

from packaging.version import InvalidVersion as InvalidPEP440Version
from packaging.version import Version as PEP440Version

from .version import InvalidVersion, InvalidVersionError, Version


@dataclass(frozen=True)
class PythonVersion:
    """A PEP-440-compliant Python version number.

    Attributes:
        text: The normalised PEP 440 form, e.g. ``1.0rc1`` for ``1.0-RC1``
    """

    text: str

    def __post_init__(self) -> None:
        try:
            parsed = PEP440Version(self.text)
        except (InvalidPEP440Version, TypeError) as exc:
            raise InvalidVersionError(
                self.text,
                InvalidVersion.INVALID_CHARACTER,
                f"Invalid PEP 440 version: {self.text!r}",
            ) from exc
        object.__setattr__(self, "text", str(parsed))

    def __str__(self) -> str:
        return self.text

    def to_version(self) -> Version:
        """Return a Version ordered like this one.

        Trailing zero release fields are dropped since PEP 440 treats
        ``1.0`` and ``1.0.0`` as equal. Post-releases become ``+postN`` and
        local labels ``+~label``, so that a local label sorts after the
        release and before any post-release.

        Examples:
            >>> str(PythonVersion("1!2.0.0rc1.post2.dev3").to_version())
            '1:2~rc1+post2~~dev3'
        """
        parsed = PEP440Version(self.text)
        release = list(parsed.release)
        while len(release) > 1 and release[-1] == 0:
            release.pop()

        text = ".".join(str(part) for part in release)
        if parsed.epoch:
            text = f"{parsed.epoch}:{text}"
        if parsed.pre is not None:
            letter, number = parsed.pre
            text += f"~{letter}{number}"
        if parsed.post is not None:
            text += f"+post{parsed.post}"
        if parsed.dev is not None:
            text += f"~~dev{parsed.dev}"
        if parsed.local is not None:
            text += f"+~{parsed.local}"
        return Version(text)

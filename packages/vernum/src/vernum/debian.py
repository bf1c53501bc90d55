# SPDX-License-Identifier: MIT
"""Debian version accessors.

Versions already follow Debian's ordering, so DebianVersion only adds the
split between the upstream version and the Debian revision.
"""

from __future__ import annotations

from typing import Optional

from .version import Version


class DebianVersion(Version):
    """A Debian package version such as ``1:2.30-1ubuntu2``."""

    @property
    def upstream_version(self) -> str:
        """Return the version of the packaged software (before the last ``-``)."""
        hyphen = self.text.rfind("-")
        if hyphen == -1:
            return self.text
        return self.text[:hyphen]

    @property
    def debian_revision(self) -> Optional[str]:
        """Return the version of the packaging itself (after the last ``-``)."""
        hyphen = self.text.rfind("-")
        if hyphen == -1:
            return None
        return self.text[hyphen + 1 :]

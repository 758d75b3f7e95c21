"""Controller version numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

_VERSION_RE = re.compile(
    r"^(\d{1,9})\.(\d{1,9})(?:(?:\.|-([a-z]+))(\d{1,9})(?:\.(\d{1,9}))?)?$"
)


@total_ordering
@dataclass(frozen=True)
class Version:
    """A version number such as ``2.1.9`` or ``2.1-beta3``."""

    major: int
    minor: int
    patch: int = 0
    tag: str = ""
    build: int = 0

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string, raising ValueError if it is malformed."""
        match = _VERSION_RE.match(text)
        if match is None:
            raise ValueError(f"invalid version {text!r}")
        major, minor, tag, patch, build = match.groups()
        return cls(
            major=int(major),
            minor=int(minor),
            patch=int(patch or 0),
            tag=tag or "",
            build=int(build or 0),
        )

    def _key(self) -> tuple:
        # A release (no tag) sorts after any tagged pre-release.
        return (self.major, self.minor, self.tag == "", self.tag, self.patch, self.build)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}"
        text += f".{self.patch}" if not self.tag else f"-{self.tag}{self.patch}"
        if self.build:
            text += f".{self.build}"
        return text


def parse_version(text: str) -> Version:
    """Parse a version string."""
    return Version.parse(text)


ZERO = Version(0, 0)
TWO_DOT_OH = Version(2, 0, 0)
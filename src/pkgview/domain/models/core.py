from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any, Optional, Union

from packaging.version import InvalidVersion, Version

_NUMERIC_CORE = re.compile(r"^[vV]?(\d+(?:\.\d+)*)(.*)$")
_NO_RELEASE = Version("0")


@total_ordering
class PackageVersion:
    """Version exactly as the package manager reported it.

    ``str()`` gives back the reported text. Ordering follows PEP 440 where
    the text parses. Semver and NuGet prereleases that PEP 440 rejects, such
    as ``1.0.0-alpha.beta``, order by their numeric core, below the matching
    release, then by their suffix.
    """

    __slots__ = ("text", "parsed", "_key")

    def __init__(self, text: str) -> None:
        self.text = text
        try:
            self.parsed: Optional[Version] = Version(text)
        except InvalidVersion:
            self.parsed = None
        self._key = self._sort_key()

    def _sort_key(self) -> tuple:
        parsed = self.parsed
        if parsed is not None:
            return (Version(parsed.base_version), not parsed.is_prerelease, 0, parsed)
        match = _NUMERIC_CORE.match(self.text)
        if match is None:
            return (_NO_RELEASE, False, 2, self.text.casefold())
        core, suffix = match.groups()
        return (Version(core), not suffix, 1, suffix.casefold())

    def _coerce(self, other: Any) -> Optional[PackageVersion]:
        if isinstance(other, PackageVersion):
            return other
        if isinstance(other, (Version, str)):
            return PackageVersion(str(other))
        return None

    def __eq__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"PackageVersion({self.text!r})"


VersionLike = Union[PackageVersion, Version, str]


def parse_version(value: Optional[VersionLike]) -> Optional[PackageVersion]:
    """Wrap *value* in a :class:`PackageVersion`; ``None`` and ``""`` stay absent."""
    if value is None or isinstance(value, PackageVersion):
        return value
    text = str(value).strip()
    if not text:
        return None
    return PackageVersion(text)


class ListViewMode(str, Enum):
    STANDARD = "standard"
    TILE = "tile"


class SortColumn(str, Enum):
    TITLE = "title"
    ID = "id"
    VERSION = "version"
    LATEST_VERSION = "latest_version"


@dataclass(frozen=True)
class PackageRecord:
    """Installed package as reported by the package service."""

    id: str
    version: VersionLike
    title: Optional[str] = None
    is_pinned: bool = False
    is_prerelease: bool = False
    summary: Optional[str] = None
    authors: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class Package:
    id: str
    version: PackageVersion
    title: Optional[str] = None
    latest_version: Optional[PackageVersion] = None
    is_pinned: bool = False
    is_prerelease: bool = False
    summary: Optional[str] = None
    authors: Optional[str] = None

    def __post_init__(self) -> None:
        self.version = parse_version(self.version)
        self.latest_version = parse_version(self.latest_version)

    @classmethod
    def from_record(cls, record: PackageRecord) -> Package:
        return cls(
            id=record.id,
            version=parse_version(record.version),
            title=record.title or None,
            is_pinned=record.is_pinned,
            is_prerelease=record.is_prerelease,
            summary=record.summary,
            authors=record.authors,
        )

    @property
    def display_name(self) -> str:
        """Title shown to the user; falls back to the package id."""
        return self.title or self.id

    @property
    def can_update(self) -> bool:
        return self.latest_version is not None

    @property
    def is_update_candidate(self) -> bool:
        """Whether a bulk update should touch this package."""
        return self.can_update and not self.is_pinned

    def matches_id(self, package_id: str) -> bool:
        return self.id.casefold() == package_id.casefold()

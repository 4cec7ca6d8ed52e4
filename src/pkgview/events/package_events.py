"""Messages exchanged with the package manager over the :class:`EventBus`."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from ..domain.models.core import VersionLike, parse_version


class PackageChangeType(str, Enum):
    INSTALLED = "installed"
    UPDATED = "updated"
    PINNED = "pinned"
    UNPINNED = "unpinned"
    UNINSTALLED = "uninstalled"


@dataclass(frozen=True, kw_only=True)
class PackageEvent:
    """Something happened to the installed package *package_id*.

    ``source`` names the publisher, for log correlation only.
    """

    package_id: str
    source: str = ""
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, kw_only=True)
class PackageChangedEvent(PackageEvent):
    """The package manager pinned, unpinned, removed or otherwise changed a package."""

    change_type: PackageChangeType


@dataclass(frozen=True, kw_only=True)
class PackageHasUpdateEvent(PackageEvent):
    """A newer version of an installed package is available.

    *latest_version* may be given as text or a ``packaging`` version; it is
    stored as the :class:`PackageVersion` the package entity holds.
    """

    latest_version: Optional[VersionLike] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "latest_version", parse_version(self.latest_version))

"""Contract for the package-manager backend consumed by the view models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...domain.models.core import PackageRecord, VersionLike

OutdatedPackage = tuple[str, VersionLike]


class PackageService(ABC):
    """Asynchronous facade over the package manager.

    Implementations raise :class:`pkgview.errors.ConnectionClosedError` when
    the connection to the backend goes away during a request.
    """

    @abstractmethod
    async def get_installed_packages(self) -> Sequence[PackageRecord]:
        ...

    @abstractmethod
    async def get_outdated_packages(
        self,
        include_prerelease: Optional[bool] = None,
        package_id: Optional[str] = None,
    ) -> Sequence[OutdatedPackage]:
        """Return ``(id, latest_version)`` pairs.

        Without *package_id* the whole installed set is checked.
        """

    @abstractmethod
    async def update_package(self, package_id: str) -> None:
        ...

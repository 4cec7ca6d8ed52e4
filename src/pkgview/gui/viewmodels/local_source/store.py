"""Canonical ordered collection of installed packages."""

from __future__ import annotations

from typing import Iterator, Optional

from ....domain.models.core import Package


class PackageStore:
    """Ordered list of :class:`Package` entities, looked up by id.

    Lookups compare ids case-insensitively. ``remove`` of an absent id is a
    no-op, callers check with :meth:`find` first when absence matters.
    """

    def __init__(self) -> None:
        self._packages: list[Package] = []

    def clear(self) -> None:
        self._packages.clear()

    def add(self, package: Package) -> None:
        self._packages.append(package)

    def remove(self, package_id: str) -> Optional[Package]:
        """Remove and return the first entry matching *package_id*."""
        for index, package in enumerate(self._packages):
            if package.matches_id(package_id):
                return self._packages.pop(index)
        return None

    def find(self, package_id: str) -> Optional[Package]:
        return next((p for p in self._packages if p.matches_id(package_id)), None)

    def snapshot(self) -> list[Package]:
        return list(self._packages)

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[Package]:
        return iter(list(self._packages))

"""Filtered, optionally sorted projection of the package store.

The projection is always derived from the store; callers never edit the
resulting list in place.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

from ....domain.models.core import Package, PackageVersion, SortColumn
from .store import PackageStore

SortKey = Callable[[Package], Any]

_NO_VERSION = PackageVersion("0")

_SORT_KEYS: dict[SortColumn, SortKey] = {
    SortColumn.TITLE: lambda p: p.display_name.casefold(),
    SortColumn.ID: lambda p: p.id.casefold(),
    SortColumn.VERSION: lambda p: p.version,
    # Packages without a known update sort after those with one
    SortColumn.LATEST_VERSION: lambda p: (p.latest_version is None, p.latest_version or _NO_VERSION),
}


def matches_query(package: Package, query: Optional[str], match_word: bool) -> bool:
    """Return True if *package* passes the search part of the filter.

    Args:
        package: Package to test.
        query: Search text; ``None`` or whitespace-only means no filter.
        match_word: Require the whole display name to equal *query*.

    Returns:
        True if the package is kept.
    """
    if query is None or not query.strip():
        return True
    name = package.display_name.casefold()
    needle = query.casefold()
    if match_word:
        return name == needle
    return needle in name


class PackageFilterView:
    """Derives the visible package list from a :class:`PackageStore`.

    Filtering keeps store order. A custom sort, when set, is applied to the
    filtered result with a stable sort.
    """

    def __init__(self) -> None:
        self._items: List[Package] = []
        self._sort_column: Optional[SortColumn] = None
        self._sort_descending = False

    @property
    def items(self) -> List[Package]:
        return list(self._items)

    @property
    def has_custom_sort(self) -> bool:
        return self._sort_column is not None

    @property
    def sort_column(self) -> Optional[SortColumn]:
        return self._sort_column

    def set_sort(self, column: Optional[SortColumn], descending: bool = False) -> None:
        """Install the comparator for *column*; ``None`` clears it."""
        self._sort_column = SortColumn(column) if column is not None else None
        self._sort_descending = bool(descending) if column is not None else False

    def clear_sort(self) -> None:
        self.set_sort(None)

    def clear(self) -> None:
        self._items = []

    def order(self, packages: Iterable[Package]) -> List[Package]:
        """Return *packages* in the current sort order (unchanged if unsorted)."""
        packages = list(packages)
        if self._sort_column is None:
            return packages
        key = _SORT_KEYS[self._sort_column]
        return sorted(packages, key=key, reverse=self._sort_descending)

    @staticmethod
    def matches(
        package: Package,
        query: Optional[str] = None,
        match_word: bool = False,
        show_only_updates: bool = False,
    ) -> bool:
        if not matches_query(package, query, match_word):
            return False
        if show_only_updates and not package.is_update_candidate:
            return False
        return True

    def recompute(
        self,
        store: PackageStore,
        query: Optional[str] = None,
        match_word: bool = False,
        show_only_updates: bool = False,
    ) -> List[Package]:
        filtered = [
            package
            for package in store.snapshot()
            if self.matches(package, query, match_word, show_only_updates)
        ]
        self._items = self.order(filtered)
        return self.items

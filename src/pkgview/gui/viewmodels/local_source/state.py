"""Shared state of the local source view model and its components."""

from __future__ import annotations

from typing import Any, List, Optional

from ....domain.models.core import ListViewMode, Package, SortColumn
from ..signal import ObservableProperty, Signal
from .filter_view import PackageFilterView
from .store import PackageStore


def _text(value: Optional[str]) -> str:
    return value or ""


def _sort_column(value: Any) -> Optional[SortColumn]:
    return SortColumn(value) if value is not None else None


class LocalSourceState:
    """Store, derived view and flags, shared by the load/update/event paths.

    Only code running on the owning event loop may touch this object.
    """

    def __init__(self) -> None:
        self.store = PackageStore()
        self.filter_view = PackageFilterView()

        self.search_query = ObservableProperty("", _text)
        self.match_word = ObservableProperty(False, bool)
        self.show_only_packages_with_update = ObservableProperty(False, bool)
        self.sort_column = ObservableProperty(None, _sort_column)
        self.sort_descending = ObservableProperty(False, bool)
        self.list_view_mode = ObservableProperty(ListViewMode.STANDARD, ListViewMode)
        self.is_loading = ObservableProperty(False, bool)
        self.first_load_incomplete = ObservableProperty(True, bool)

        # emits the new visible list after every recompute
        self.view_changed = Signal()

    @property
    def view(self) -> List[Package]:
        return self.filter_view.items

    def refresh_view(self) -> List[Package]:
        items = self.filter_view.recompute(
            self.store,
            self.search_query.value,
            self.match_word.value,
            self.show_only_packages_with_update.value,
        )
        self.view_changed.emit(items)
        return items

    def clear_view(self) -> None:
        self.filter_view.clear()
        self.view_changed.emit([])

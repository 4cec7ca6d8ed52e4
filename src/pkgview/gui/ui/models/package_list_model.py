"""Qt list model mirroring the visible packages of a local source."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, List, Optional

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt, Signal

from ...viewmodels.local_source.viewmodel import LocalSourceViewModel
from ....domain.models.core import Package


class PackageRoles(IntEnum):
    """Custom roles exposed to QML or widgets."""

    IdRole = Qt.ItemDataRole.UserRole + 1
    TitleRole = Qt.ItemDataRole.UserRole + 2
    VersionRole = Qt.ItemDataRole.UserRole + 3
    LatestVersionRole = Qt.ItemDataRole.UserRole + 4
    IsPinnedRole = Qt.ItemDataRole.UserRole + 5
    IsPrereleaseRole = Qt.ItemDataRole.UserRole + 6
    CanUpdateRole = Qt.ItemDataRole.UserRole + 7


class PackageListModel(QAbstractListModel):
    """Read-only model reset whenever the view model recomputes its view."""

    countChanged = Signal()

    def __init__(self, view_model: LocalSourceViewModel, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._view_model = view_model
        self._items: List[Package] = list(view_model.view)
        view_model.view_changed.connect(self._on_view_changed)

    def roleNames(self) -> dict[int, bytes]:  # noqa: N802  # Qt override
        return {
            PackageRoles.IdRole: b"id",
            PackageRoles.TitleRole: b"title",
            PackageRoles.VersionRole: b"version",
            PackageRoles.LatestVersionRole: b"latestVersion",
            PackageRoles.IsPinnedRole: b"isPinned",
            PackageRoles.IsPrereleaseRole: b"isPrerelease",
            PackageRoles.CanUpdateRole: b"canUpdate",
        }

    def rowCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802  # Qt override
        if parent is not None and parent.isValid():
            return 0
        return len(self._items)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        row = index.row()
        if not index.isValid() or row < 0 or row >= len(self._items):
            return None

        package = self._items[row]
        if role == Qt.ItemDataRole.DisplayRole or role == PackageRoles.TitleRole:
            return package.display_name
        if role == PackageRoles.IdRole:
            return package.id
        if role == PackageRoles.VersionRole:
            return str(package.version)
        if role == PackageRoles.LatestVersionRole:
            return str(package.latest_version) if package.latest_version is not None else ""
        if role == PackageRoles.IsPinnedRole:
            return package.is_pinned
        if role == PackageRoles.IsPrereleaseRole:
            return package.is_prerelease
        if role == PackageRoles.CanUpdateRole:
            return package.can_update
        return None

    def package_at(self, row: int) -> Optional[Package]:
        if 0 <= row < len(self._items):
            return self._items[row]
        return None

    def dispose(self) -> None:
        self._view_model.view_changed.disconnect(self._on_view_changed)

    def _on_view_changed(self, items: List[Package]) -> None:
        self.beginResetModel()
        self._items = list(items)
        self.endResetModel()
        self.countChanged.emit()

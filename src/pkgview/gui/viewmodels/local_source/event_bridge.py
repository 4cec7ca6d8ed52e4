"""Apply single-package change notifications without a full reload."""

from __future__ import annotations

import logging

from ....application.services.package_service import PackageService
from ....domain.models.core import Package
from ....errors import PackageNotFoundError
from ....events.bus import EventBus
from ....events.package_events import (
    PackageChangeType,
    PackageChangedEvent,
    PackageHasUpdateEvent,
)
from .loader import PackageLoadPipeline, publish_available_updates
from .state import LocalSourceState

logger = logging.getLogger(__name__)


class PackageEventBridge:
    """Pinned, unpinned and uninstalled changes are patched in place.

    Any other change kind falls back to a full reload.
    """

    def __init__(
        self,
        state: LocalSourceState,
        package_service: PackageService,
        event_bus: EventBus,
        load_pipeline: PackageLoadPipeline,
    ) -> None:
        self._state = state
        self._service = package_service
        self._event_bus = event_bus
        self._load_pipeline = load_pipeline

    async def handle(self, event: PackageChangedEvent) -> None:
        change = event.change_type
        logger.debug("Package %s changed: %s", event.package_id, change)

        if change == PackageChangeType.PINNED:
            self._state.refresh_view()
        elif change == PackageChangeType.UNPINNED:
            await self._on_unpinned(self._require(event.package_id))
        elif change == PackageChangeType.UNINSTALLED:
            self._require(event.package_id)
            self._state.store.remove(event.package_id)
            self._state.refresh_view()
        else:
            await self._load_pipeline.run()

    def on_package_has_update(self, event: PackageHasUpdateEvent) -> None:
        package = self._state.store.find(event.package_id)
        if package is None:
            return
        package.latest_version = event.latest_version
        # a running load recomputes the view once at the end
        if not self._state.is_loading.value:
            self._state.refresh_view()

    async def _on_unpinned(self, package: Package) -> None:
        if package.latest_version is None:
            updates = await self._service.get_outdated_packages(package.is_prerelease, package.id)
            publish_available_updates(self._event_bus, updates, source=__name__)
        self._state.refresh_view()

    def _require(self, package_id: str) -> Package:
        package = self._state.store.find(package_id)
        if package is None:
            raise PackageNotFoundError(f"Package {package_id!r} is not installed")
        return package

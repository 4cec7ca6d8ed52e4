"""Repopulate the package store from the package service."""

from __future__ import annotations

import logging
from typing import Iterable

from ....application.services.package_service import OutdatedPackage, PackageService
from ....domain.models.core import Package
from ....errors import ConnectionClosedError
from ....errors.handler import ErrorHandler, ErrorSeverity
from ....events.bus import EventBus
from ....events.package_events import PackageHasUpdateEvent
from .state import LocalSourceState

logger = logging.getLogger(__name__)


def publish_available_updates(
    event_bus: EventBus,
    updates: Iterable[OutdatedPackage],
    source: str = "",
) -> int:
    """Publish one :class:`PackageHasUpdateEvent` per ``(id, version)`` pair."""
    count = 0
    for package_id, latest_version in updates:
        event_bus.publish(
            PackageHasUpdateEvent(
                package_id=package_id,
                latest_version=latest_version,
                source=source,
            )
        )
        count += 1
    return count


class PackageLoadPipeline:
    """Clear and refill the store, then announce known updates.

    A run while ``is_loading`` is set returns immediately. A closed service
    connection ends the run quietly, showing whatever was loaded so far.
    A record whose id repeats an earlier one (ignoring case) is dropped
    with an error log, so ids stay unique in the store.
    """

    def __init__(
        self,
        state: LocalSourceState,
        package_service: PackageService,
        event_bus: EventBus,
        error_handler: ErrorHandler,
    ) -> None:
        self._state = state
        self._service = package_service
        self._event_bus = event_bus
        self._errors = error_handler

    async def run(self) -> None:
        state = self._state
        if state.is_loading.value:
            logger.debug("Package load requested while busy; ignoring")
            return

        state.is_loading.value = True
        try:
            state.store.clear()
            state.clear_view()

            records = await self._service.get_installed_packages()
            for record in records:
                package = Package.from_record(record)
                if state.store.find(package.id) is not None:
                    logger.error("Package service listed %s twice; dropping the later entry", package.id)
                    continue
                state.store.add(package)
            state.first_load_incomplete.value = False
            logger.info("Loaded %d installed packages", len(state.store))

            updates = await self._service.get_outdated_packages()
            published = publish_available_updates(self._event_bus, updates, source=__name__)
            logger.info("%d package(s) have updates available", published)

            state.refresh_view()
        except ConnectionClosedError:
            logger.warning("Connection closed while loading packages")
            state.refresh_view()
        except Exception as exc:
            state.refresh_view()
            self._errors.handle(exc, ErrorSeverity.CRITICAL, {"operation": "load_packages"})
            raise
        finally:
            state.is_loading.value = False

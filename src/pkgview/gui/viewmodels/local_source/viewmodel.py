"""LocalSourceViewModel: installed packages of this machine.

Pure Python, no Qt dependency. All public coroutines must be awaited on the
event loop the view model was initialised on; bus notifications arriving on
other threads are marshalled onto that loop by :class:`TaskDispatcher`.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .... import config
from ....application.services.export import write_packages_config
from ....application.services.package_service import PackageService
from ....application.services.persistence import PersistenceService
from ....application.services.progress import ProgressService
from ....domain.models.core import ListViewMode, Package
from ....errors.handler import ErrorHandler, ErrorSeverity
from ....events.bus import EventBus
from ....events.package_events import PackageChangedEvent, PackageHasUpdateEvent
from ....settings.manager import SettingsManager
from ..base import BaseViewModel
from .dispatcher import TaskDispatcher
from .event_bridge import PackageEventBridge
from .loader import PackageLoadPipeline
from .state import LocalSourceState
from .updater import UpdateOrchestrator

TILE_VIEW_SETTING = "ui.default_to_tile_view_for_local_source"


class LocalSourceViewModel(BaseViewModel):
    def __init__(
        self,
        package_service: PackageService,
        progress_service: ProgressService,
        persistence_service: PersistenceService,
        settings: SettingsManager,
        event_bus: EventBus,
        error_handler: Optional[ErrorHandler] = None,
        dispatcher: Optional[TaskDispatcher] = None,
        display_name: str = "This PC",
    ) -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)
        self._progress = progress_service
        self._persistence = persistence_service
        self._settings = settings
        self._errors = error_handler or ErrorHandler(self._logger, event_bus)
        self._dispatcher = dispatcher or TaskDispatcher()
        self.display_name = display_name

        self._state = state = LocalSourceState()
        self._has_loaded = False
        self._export_all = True

        # Observable properties
        self.search_query = state.search_query
        self.match_word = state.match_word
        self.show_only_packages_with_update = state.show_only_packages_with_update
        self.sort_column = state.sort_column
        self.sort_descending = state.sort_descending
        self.list_view_mode = state.list_view_mode
        self.is_loading = state.is_loading
        self.first_load_incomplete = state.first_load_incomplete

        # Signals
        self.view_changed = state.view_changed

        self._load_pipeline = PackageLoadPipeline(state, package_service, event_bus, self._errors)
        self._updater = UpdateOrchestrator(
            state, package_service, progress_service, self._load_pipeline, self._errors
        )
        self._bridge = PackageEventBridge(state, package_service, event_bus, self._load_pipeline)

        self.subscribe_event(event_bus, PackageChangedEvent, self._on_package_changed)
        self.subscribe_event(event_bus, PackageHasUpdateEvent, self._on_package_has_update)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def packages(self) -> List[Package]:
        return self._state.store.snapshot()

    @property
    def view(self) -> List[Package]:
        return self._state.view

    @property
    def has_loaded(self) -> bool:
        return self._has_loaded

    @property
    def dispatcher(self) -> TaskDispatcher:
        return self._dispatcher

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def initialize(self) -> None:
        """Load packages and start observing settings and filter changes.

        Only the first call does anything.
        """
        if self._has_loaded:
            return
        try:
            self._dispatcher.bind()
            self.list_view_mode.value = self._view_mode_from_settings()
            self.connect_signal(self._settings.settings_changed, self._on_settings_changed)

            await self._load_pipeline.run()

            for prop in (self.match_word, self.search_query, self.show_only_packages_with_update):
                self.connect_signal(prop.changed, self._on_filter_criteria_changed)
            self.connect_signal(self.list_view_mode.changed, self._on_view_mode_changed)
            self.connect_signal(self.sort_column.changed, self._on_sort_changed)
            self.connect_signal(self.sort_descending.changed, self._on_sort_changed)

            self._has_loaded = True
        except Exception:
            self._logger.critical("Local source view model failed to load", exc_info=True)
            raise

        self._announce_bootstrap_update()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def can_refresh_packages(self) -> bool:
        return self._has_loaded and not self.is_loading.value

    async def refresh_packages(self) -> None:
        await self._load_pipeline.run()

    def can_update_all(self) -> bool:
        return any(p.is_update_candidate for p in self._state.store)

    async def update_all(self) -> None:
        await self._updater.update_all()

    async def handle_package_changed(self, event: PackageChangedEvent) -> None:
        await self._bridge.handle(event)

    def can_export_all(self) -> bool:
        return self._export_all

    def export_all(self) -> bool:
        """Write every installed package to a user-chosen ``packages.config``.

        Returns False when the user dismissed the save dialog.
        """
        self._export_all = False
        try:
            stream = self._persistence.save_file(config.EXPORT_FILE_PATTERN, config.EXPORT_FILTER_NAME)
            if stream is None:
                return False
            with stream:
                write_packages_config(self._state.store.snapshot(), stream)
            self._logger.info("Exported %d package(s)", len(self._state.store))
            return True
        except Exception as exc:
            self._errors.handle(exc, ErrorSeverity.CRITICAL, {"operation": "export_all"})
            raise
        finally:
            self._export_all = True

    # ------------------------------------------------------------------
    # Notification handlers
    # ------------------------------------------------------------------
    def _on_package_changed(self, event: PackageChangedEvent) -> None:
        self._dispatcher.post(self._bridge.handle, event)

    def _on_package_has_update(self, event: PackageHasUpdateEvent) -> None:
        self._dispatcher.run_on_loop(self._bridge.on_package_has_update, event)

    def _on_settings_changed(self, key: str, value: object) -> None:
        self._dispatcher.run_on_loop(self._apply_view_mode_setting)

    def _apply_view_mode_setting(self) -> None:
        self.list_view_mode.value = self._view_mode_from_settings()

    def _on_filter_criteria_changed(self, new_value: object, old_value: object) -> None:
        self._state.refresh_view()

    def _on_view_mode_changed(self, new_value: ListViewMode, old_value: ListViewMode) -> None:
        if new_value != ListViewMode.TILE:
            return
        # tile layout has no column sort
        self._state.filter_view.clear_sort()
        self.sort_column.value = None
        self._state.refresh_view()

    def _on_sort_changed(self, new_value: object, old_value: object) -> None:
        if self.list_view_mode.value == ListViewMode.TILE:
            self._state.filter_view.clear_sort()
        else:
            self._state.filter_view.set_sort(self.sort_column.value, self.sort_descending.value)
        self._state.refresh_view()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _view_mode_from_settings(self) -> ListViewMode:
        tile = bool(self._settings.get(TILE_VIEW_SETTING, False))
        return ListViewMode.TILE if tile else ListViewMode.STANDARD

    def _announce_bootstrap_update(self) -> None:
        try:
            package = self._state.store.find(config.BOOTSTRAP_PACKAGE_ID)
            if package is not None and package.can_update:
                self._dispatcher.spawn_detached(
                    self._progress.show_message,
                    config.BOOTSTRAP_NOTIFICATION_TITLE,
                    config.BOOTSTRAP_NOTIFICATION_MESSAGE,
                )
        except Exception as exc:
            self._logger.warning("Could not announce the %s update: %s", config.BOOTSTRAP_PACKAGE_ID, exc)

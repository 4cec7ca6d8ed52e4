"""Bulk update of every outdated, unpinned package."""

from __future__ import annotations

import logging

from .... import config
from ....application.services.package_service import PackageService
from ....application.services.progress import ProgressService
from ....errors.handler import ErrorHandler, ErrorSeverity
from .loader import PackageLoadPipeline
from .state import LocalSourceState

logger = logging.getLogger(__name__)


class UpdateOrchestrator:
    """Update packages one at a time inside a cancellable progress scope.

    Cancellation is checked between packages only; packages updated before
    the request stay updated. A completed run resets the update-only filter
    and reloads the store.
    """

    def __init__(
        self,
        state: LocalSourceState,
        package_service: PackageService,
        progress_service: ProgressService,
        load_pipeline: PackageLoadPipeline,
        error_handler: ErrorHandler,
    ) -> None:
        self._state = state
        self._service = package_service
        self._progress = progress_service
        self._load_pipeline = load_pipeline
        self._errors = error_handler

    async def update_all(self) -> None:
        state = self._state
        if state.is_loading.value:
            logger.debug("Update all requested while busy; ignoring")
            return

        progress = self._progress
        state.is_loading.value = True
        scope_open = False
        try:
            await progress.start_loading(config.PACKAGES_PROGRESS_TITLE, cancellable=True)
            scope_open = True
            progress.write_message(config.FETCHING_PACKAGES_MESSAGE)
            token = progress.get_cancellation_token()

            targets = state.filter_view.order(p for p in state.store if p.is_update_candidate)
            total = len(targets)
            for completed, package in enumerate(targets):
                if token.is_cancellation_requested:
                    logger.info("Update all cancelled after %d of %d package(s)", completed, total)
                    return
                progress.report(min(completed / total, 1.0))
                await self._service.update_package(package.id)

            scope_open = False
            await progress.stop_loading()
            state.is_loading.value = False
            state.show_only_packages_with_update.value = False
            logger.info("Updated %d package(s)", total)
        except Exception as exc:
            self._errors.handle(exc, ErrorSeverity.CRITICAL, {"operation": "update_all"})
            raise
        finally:
            if scope_open:
                await self._close_scope()
            state.is_loading.value = False

        await self._load_pipeline.run()

    async def _close_scope(self) -> None:
        try:
            await self._progress.stop_loading()
        except Exception:
            logger.exception("Failed to close the update progress scope")

import logging
from typing import Optional

from .container import Container
from .lifetime import Lifetime
from ..application.services.package_service import PackageService
from ..application.services.persistence import PersistenceService
from ..application.services.progress import LoggingProgressService, ProgressService
from ..errors.handler import ErrorHandler
from ..events.bus import EventBus
from ..gui.viewmodels.local_source.dispatcher import TaskDispatcher
from ..gui.viewmodels.local_source.viewmodel import LocalSourceViewModel
from ..settings.manager import SettingsManager


def bootstrap(
    container: Container,
    *,
    package_service: PackageService,
    persistence_service: PersistenceService,
    progress_service: Optional[ProgressService] = None,
    settings: Optional[SettingsManager] = None,
) -> None:
    """Register all application services in the DI container."""
    container.register_singleton(EventBus, EventBus)
    container.register_singleton(TaskDispatcher, TaskDispatcher)
    container.register_instance(PackageService, package_service)
    container.register_instance(PersistenceService, persistence_service)
    container.register_instance(ProgressService, progress_service or LoggingProgressService())
    if settings is not None:
        container.register_instance(SettingsManager, settings)
    else:
        container.register_singleton(SettingsManager, SettingsManager)

    container.register_factory(
        ErrorHandler,
        lambda c: ErrorHandler(logging.getLogger("pkgview"), c.resolve(EventBus)),
        lifetime=Lifetime.SINGLETON,
    )
    container.register_factory(
        LocalSourceViewModel,
        lambda c: LocalSourceViewModel(
            package_service=c.resolve(PackageService),
            progress_service=c.resolve(ProgressService),
            persistence_service=c.resolve(PersistenceService),
            settings=c.resolve(SettingsManager),
            event_bus=c.resolve(EventBus),
            error_handler=c.resolve(ErrorHandler),
            dispatcher=c.resolve(TaskDispatcher),
        ),
        lifetime=Lifetime.SINGLETON,
    )

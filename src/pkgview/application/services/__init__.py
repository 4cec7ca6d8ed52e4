from .export import build_packages_document, write_packages_config
from .package_service import OutdatedPackage, PackageService
from .persistence import PathPersistenceService, PersistenceService
from .progress import CancellationToken, LoggingProgressService, ProgressService

__all__ = [
    "CancellationToken",
    "LoggingProgressService",
    "OutdatedPackage",
    "PackageService",
    "PathPersistenceService",
    "PersistenceService",
    "ProgressService",
    "build_packages_document",
    "write_packages_config",
]

"""Save-file collaborator used by the export feature."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional


class PersistenceService(ABC):
    @abstractmethod
    def save_file(self, default_extension: str, filter_name: str) -> Optional[BinaryIO]:
        """Return a writable binary stream, or ``None`` when the user cancels."""


class PathPersistenceService(PersistenceService):
    """Non-interactive variant that always writes to a fixed path."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def save_file(self, default_extension: str, filter_name: str) -> Optional[BinaryIO]:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        return self._path.open("wb")

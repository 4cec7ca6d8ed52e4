"""Fakes and factories shared by the local source view model tests."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional
from unittest.mock import Mock

import pytest

from pkgview.application.services.package_service import PackageService
from pkgview.application.services.persistence import PersistenceService
from pkgview.application.services.progress import LoggingProgressService
from pkgview.domain.models.core import PackageRecord
from pkgview.events.bus import EventBus
from pkgview.gui.viewmodels.local_source.viewmodel import TILE_VIEW_SETTING, LocalSourceViewModel
from pkgview.settings.manager import SettingsManager


class FakePackageService(PackageService):
    def __init__(self, installed=(), outdated=()):
        self.installed = list(installed)
        self.outdated = [(pid, str(v)) for pid, v in outdated]
        self.installed_calls = 0
        self.outdated_calls: list[tuple[Optional[bool], Optional[str]]] = []
        self.updated: list[str] = []
        self.on_update: Optional[Callable[[str], None]] = None
        self.installed_error: Optional[Exception] = None
        self.outdated_error: Optional[Exception] = None

    async def get_installed_packages(self):
        self.installed_calls += 1
        await asyncio.sleep(0)
        if self.installed_error is not None:
            raise self.installed_error
        return list(self.installed)

    async def get_outdated_packages(self, include_prerelease=None, package_id=None):
        self.outdated_calls.append((include_prerelease, package_id))
        await asyncio.sleep(0)
        if self.outdated_error is not None:
            raise self.outdated_error
        if package_id is None:
            return list(self.outdated)
        return [u for u in self.outdated if u[0].casefold() == package_id.casefold()]

    async def update_package(self, package_id):
        await asyncio.sleep(0)
        self.updated.append(package_id)
        if self.on_update is not None:
            self.on_update(package_id)


class RecordingProgressService(LoggingProgressService):
    def __init__(self, cancel_on_start: bool = False):
        super().__init__()
        self.cancel_on_start = cancel_on_start
        self.starts: list[tuple[str, bool]] = []
        self.stops = 0
        self.reports: list[float] = []
        self.messages: list[tuple[str, str]] = []

    async def start_loading(self, title, cancellable=False):
        await super().start_loading(title, cancellable)
        self.starts.append((title, cancellable))
        if self.cancel_on_start:
            self.cancel()

    async def stop_loading(self):
        self.stops += 1
        await super().stop_loading()

    def report(self, fraction):
        super().report(fraction)
        self.reports.append(fraction)

    async def show_message(self, title, message):
        self.messages.append((title, message))


def _record(package_id, version="1.0", **kwargs) -> PackageRecord:
    return PackageRecord(id=package_id, version=version, **kwargs)


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def make_service():
    return FakePackageService


@pytest.fixture
def progress():
    return RecordingProgressService()


@pytest.fixture
def settings(tmp_path):
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    return manager


@pytest.fixture
def make_view_model(settings, progress):
    def _make(service, *, tile=False, persistence=None, progress_service=None):
        if tile:
            settings.set(TILE_VIEW_SETTING, True)
        bus = EventBus()
        vm = LocalSourceViewModel(
            package_service=service,
            progress_service=progress_service or progress,
            persistence_service=persistence or Mock(spec=PersistenceService),
            settings=settings,
            event_bus=bus,
        )
        return vm, bus

    return _make


@pytest.fixture
def make_progress():
    return RecordingProgressService

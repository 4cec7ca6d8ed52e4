from dataclasses import dataclass

from packaging.version import Version

from pkgview.domain.models.core import PackageVersion
from pkgview.events import (
    EventBus,
    Event,
    PackageChangeType,
    PackageChangedEvent,
    PackageHasUpdateEvent,
)


@dataclass(kw_only=True)
class SimpleEvent(Event):
    payload: str = ""


def test_subscribe_publish():
    bus = EventBus()
    received = []

    bus.subscribe(SimpleEvent, lambda e: received.append(e.payload))
    bus.publish(SimpleEvent(payload="hello"))

    assert received == ["hello"]


def test_handlers_are_keyed_by_message_type():
    bus = EventBus()
    changed, updates = [], []
    bus.subscribe(PackageChangedEvent, changed.append)
    bus.subscribe(PackageHasUpdateEvent, updates.append)

    bus.publish(PackageChangedEvent(package_id="git", change_type=PackageChangeType.PINNED))
    bus.publish(PackageHasUpdateEvent(package_id="git", latest_version=Version("2.2")))

    assert [e.change_type for e in changed] == [PackageChangeType.PINNED]
    assert [e.latest_version for e in updates] == [Version("2.2")]


def test_update_event_keeps_reported_version_text():
    event = PackageHasUpdateEvent(package_id="tool", latest_version="1.0.0-alpha.beta")

    assert isinstance(event.latest_version, PackageVersion)
    assert str(event.latest_version) == "1.0.0-alpha.beta"
    assert PackageHasUpdateEvent(package_id="tool").latest_version is None


def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(SimpleEvent, broken)
    bus.subscribe(SimpleEvent, lambda e: received.append(e.payload))
    bus.publish(SimpleEvent(payload="still"))

    assert received == ["still"]


def test_unsubscribe_and_count():
    bus = EventBus()
    sub = bus.subscribe(SimpleEvent, lambda e: None)
    assert bus.subscriber_count(SimpleEvent) == 1

    bus.unsubscribe(sub)

    assert bus.subscriber_count(SimpleEvent) == 0
    assert sub.active is False

from .bus import Event, EventBus, Subscription
from .package_events import (
    PackageChangeType,
    PackageChangedEvent,
    PackageEvent,
    PackageHasUpdateEvent,
)

__all__ = [
    "Event",
    "EventBus",
    "PackageChangeType",
    "PackageChangedEvent",
    "PackageEvent",
    "PackageHasUpdateEvent",
    "Subscription",
]

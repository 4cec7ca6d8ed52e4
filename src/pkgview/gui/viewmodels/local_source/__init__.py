"""Local source view model package.

- `store`: canonical ordered package collection
- `filter_view`: search/update-only filtering and column sorting
- `loader`: full reload from the package service
- `updater`: cancellable bulk update
- `event_bridge`: incremental handling of single-package changes
- `dispatcher`: event-loop execution context
- `viewmodel`: the composed `LocalSourceViewModel`
"""

from .dispatcher import TaskDispatcher
from .event_bridge import PackageEventBridge
from .filter_view import PackageFilterView, matches_query
from .loader import PackageLoadPipeline, publish_available_updates
from .state import LocalSourceState
from .store import PackageStore
from .updater import UpdateOrchestrator
from .viewmodel import LocalSourceViewModel

__all__ = [
    "LocalSourceState",
    "LocalSourceViewModel",
    "PackageEventBridge",
    "PackageFilterView",
    "PackageLoadPipeline",
    "PackageStore",
    "TaskDispatcher",
    "UpdateOrchestrator",
    "matches_query",
    "publish_available_updates",
]

"""Default configuration values for pkgview."""

from __future__ import annotations

from typing import Final

# Package manager package itself; an available update for it is announced
# once after the first load.
BOOTSTRAP_PACKAGE_ID: Final[str] = "chocolatey"

EXPORT_FILE_PATTERN: Final[str] = "*.config"
EXPORT_FILTER_NAME: Final[str] = "Config files"

# ---------------------------------------------------------------------------
# User-facing strings
# ---------------------------------------------------------------------------

PACKAGES_PROGRESS_TITLE: Final[str] = "Packages"
FETCHING_PACKAGES_MESSAGE: Final[str] = "Fetching packages..."
BOOTSTRAP_NOTIFICATION_TITLE: Final[str] = "Chocolatey"
BOOTSTRAP_NOTIFICATION_MESSAGE: Final[str] = (
    "There is an update available for Chocolatey. Update it before updating other packages."
)

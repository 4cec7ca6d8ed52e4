"""Custom exception hierarchy for pkgview."""

from __future__ import annotations


class PkgViewError(Exception):
    """Base class for all custom errors raised by pkgview."""


# --- Layer bases ---

class DomainError(PkgViewError):
    """Base class for domain-level errors."""


class InfrastructureError(PkgViewError):
    """Base class for infrastructure-level errors."""


# --- Domain errors ---

class PackageNotFoundError(DomainError):
    """Raised when a change notification names a package that is not loaded."""


# --- Infrastructure errors ---

class PackageServiceError(InfrastructureError):
    """Raised when the package service fails to answer a request."""


class ConnectionClosedError(PackageServiceError):
    """Raised when the package service connection is closed mid-request."""


# --- DI-specific errors ---

class CircularDependencyError(PkgViewError):
    """Raised when a circular dependency is detected during resolution."""


class ResolutionError(PkgViewError):
    """Raised when a dependency cannot be resolved."""


# --- Settings ---

class SettingsError(PkgViewError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""

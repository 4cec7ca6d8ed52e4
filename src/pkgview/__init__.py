"""Local package state controller for desktop package managers."""

__version__ = "0.1.0"

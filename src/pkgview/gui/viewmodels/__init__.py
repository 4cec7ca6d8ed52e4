"""Pure Python view models (no Qt dependency)."""

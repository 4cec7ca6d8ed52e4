"""Qt adapters over the pure Python view models."""

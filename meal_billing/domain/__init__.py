"""Domain layer for monthly meal billing."""

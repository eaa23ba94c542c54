"""Monthly meal billing for a community kitchen."""

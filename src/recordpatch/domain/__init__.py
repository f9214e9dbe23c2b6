"""Domain layer - entities and change-tracking services."""

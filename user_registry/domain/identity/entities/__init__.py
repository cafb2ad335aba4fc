"""User entities."""

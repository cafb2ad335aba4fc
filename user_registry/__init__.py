"""User registry service."""

"""
Application layer.

Holds the user service together with what it needs from the outside
world: request DTOs, field validators, and the repository and logger
ports. Adapters for those ports live in `user_registry.infrastructure`.
"""

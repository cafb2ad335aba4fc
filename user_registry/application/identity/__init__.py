"""Identity application layer."""

from user_registry.application.identity.dtos import CreateUserRequest, UpdateUserRequest
from user_registry.application.identity.services.user_service import UserService

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserService",
]

"""Identity context schemas."""

from user_registry.infrastructure.identity.schemas.user_schemas import (
    MessageResponse,
    UserCreateRequest,
    UserDetailsResponse,
    UserUpdateRequest,
)

__all__ = [
    "MessageResponse",
    "UserCreateRequest",
    "UserDetailsResponse",
    "UserUpdateRequest",
]

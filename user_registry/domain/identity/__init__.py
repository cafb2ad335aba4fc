"""Identity domain layer."""

from user_registry.domain.identity.entities.user import User
from user_registry.domain.identity.exceptions import (
    UserNameAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "User",
    "UserNameAlreadyExistsError",
    "UserNotFoundError",
]

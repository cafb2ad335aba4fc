"""Identity domain exceptions."""

from user_registry.domain.common.exceptions import ConflictError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)


class UserNameAlreadyExistsError(ConflictError):
    """Raised when a user name is already registered to another user."""

    def __init__(self, name: str) -> None:
        super().__init__(f"User name {name} is already registered", {"name": name})
        self.name = name

"""Application service for user management."""

import time

from user_registry.application.identity.dtos import CreateUserRequest, UpdateUserRequest
from user_registry.application.identity.protocols.user_repository import UserRepositoryProtocol
from user_registry.application.identity.validators import (
    validate_create_user_request,
    validate_update_user_request,
)
from user_registry.application.ports.logger import LoggerProtocol
from user_registry.domain.common.exceptions import ValidationError
from user_registry.domain.common.value_objects.ids import UserId
from user_registry.domain.identity.entities.user import User
from user_registry.domain.identity.exceptions import UserNameAlreadyExistsError, UserNotFoundError

CREATE_ERROR_SEPARATOR = ", "
UPDATE_ERROR_SEPARATOR = "\n"


class UserService:
    """
    Orchestrates listing, registering, updating and deleting users.

    Each write runs validate -> precondition checks -> repository call.
    The repository call is timed and bracketed by a start and a completion
    event; a repository failure is logged once and re-raised unchanged.
    Validation, conflict and not-found failures are raised before any
    event is emitted.

    The service keeps no per-call state, so one instance may serve
    concurrent requests.
    """

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies."""
        self.user_repository = user_repository
        self.logger = logger

    async def list_all(self) -> list[User]:
        """
        Return every registered user.

        Returns:
            All users; an empty list when none exist
        """
        self.logger.info("user_list_started")
        try:
            return await self.user_repository.get_all()
        except Exception as e:
            self.logger.error(e, "user_list_failed")
            raise
        finally:
            self.logger.info("user_list_completed")

    async def create(self, request: CreateUserRequest) -> bool:
        """
        Register a new user.

        Args:
            request: Name, age and date of birth of the new user

        Returns:
            Whether the repository persisted the user

        Raises:
            ValidationError: If any field rule is violated
            UserNameAlreadyExistsError: If the name is already registered
        """
        result = validate_create_user_request(request)
        if not result.is_valid:
            raise ValidationError(result.join(CREATE_ERROR_SEPARATOR), errors=result.messages)

        if await self.user_repository.name_exists(request.name):
            raise UserNameAlreadyExistsError(request.name)

        user = self.build_user(request)

        self.logger.info("user_registration_started", name=user.name)
        started = time.perf_counter()
        try:
            return await self.user_repository.create(user)
        except Exception as e:
            self.logger.error(e, "user_registration_failed", name=user.name)
            raise
        finally:
            self.logger.info(
                "user_registration_completed",
                user_id=user.persisted_id,
                elapsed_ms=_elapsed_ms(started),
            )

    async def delete_by_id(self, user_id: int) -> bool:
        """
        Delete a user.

        Args:
            user_id: ID of the user to delete

        Returns:
            Whether the repository removed the user

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = await self._get_user(user_id)

        self.logger.info("user_deletion_started", user_id=user_id)
        started = time.perf_counter()
        try:
            return await self.user_repository.delete(user)
        except Exception as e:
            self.logger.error(e, "user_deletion_failed", user_id=user_id)
            raise
        finally:
            self.logger.info(
                "user_deletion_completed",
                user_id=user.persisted_id,
                elapsed_ms=_elapsed_ms(started),
            )

    async def update(self, request: UpdateUserRequest) -> bool:
        """
        Overwrite an existing user's name, age and date of birth.

        The user is looked up before the request is validated, so an unknown
        id is reported as not found even when the fields are also invalid.

        Args:
            request: ID of the user and the new field values

        Returns:
            Whether the repository stored the changes

        Raises:
            UserNotFoundError: If no user has this id
            ValidationError: If any field rule is violated
            UserNameAlreadyExistsError: If the new name belongs to another user
        """
        user = await self._get_user(request.id)

        result = validate_update_user_request(request)
        if not result.is_valid:
            raise ValidationError(result.join(UPDATE_ERROR_SEPARATOR), errors=result.messages)

        if request.name != user.name and await self.user_repository.name_exists(request.name):
            raise UserNameAlreadyExistsError(request.name)

        self.apply_update(user, request)

        self.logger.info("user_update_started", name=request.name)
        started = time.perf_counter()
        try:
            return await self.user_repository.update(user)
        except Exception as e:
            self.logger.error(e, "user_update_failed", user_id=user.persisted_id)
            raise
        finally:
            self.logger.info(
                "user_update_completed",
                user_id=user.persisted_id,
                elapsed_ms=_elapsed_ms(started),
            )

    @staticmethod
    def build_user(request: CreateUserRequest) -> User:
        """Build an unsaved user from a registration request."""
        return User.create(
            name=request.name,
            age=request.age,
            date_of_birth=request.date_of_birth,
        )

    @staticmethod
    def apply_update(user: User, request: UpdateUserRequest) -> None:
        """Copy the request's fields onto the user; the id is left alone."""
        user.update_details(
            name=request.name,
            age=request.age,
            date_of_birth=request.date_of_birth,
        )

    async def _get_user(self, user_id: int) -> User:
        # Ids outside the key column's range can't match a stored user
        if not 0 < user_id <= UserId.MAX_VALUE:
            raise UserNotFoundError(user_id)

        user = await self.user_repository.get_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)

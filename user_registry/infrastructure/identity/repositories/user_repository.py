"""Repository for User domain entities."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.domain.common.value_objects.ids import UserId
from user_registry.domain.identity.entities.user import User
from user_registry.domain.identity.exceptions import UserNameAlreadyExistsError
from user_registry.exceptions import DependencyError
from user_registry.infrastructure.identity.mappers.user_mapper import UserMapper
from user_registry.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """
    Async SQLAlchemy repository for User domain entities.

    Driver and ORM failures surface as DependencyError; a unique
    constraint violation on the name column surfaces as
    UserNameAlreadyExistsError.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = UserMapper()

    async def get_all(self) -> list[User]:
        """
        Fetch all users ordered by id.

        Returns:
            List of user entities, empty if none exist
        """
        stmt = select(UserORM).order_by(UserORM.id)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise DependencyError("Failed to load users", e) from e
        return [self.mapper.to_domain(orm_model) for orm_model in result.scalars().all()]

    async def get_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        orm_model = await self._find_orm(user_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def name_exists(self, name: str) -> bool:
        """
        Check if a name is already registered.

        Args:
            name: The name to check

        Returns:
            True if name exists, False otherwise
        """
        stmt = select(UserORM.id).where(UserORM.name == name)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise DependencyError("Failed to check user name", e) from e
        return result.scalar_one_or_none() is not None

    async def create(self, user: User) -> bool:
        """
        Insert a new user and assign the generated id to the entity.

        Args:
            user: The unsaved user entity

        Returns:
            True once the row is committed

        Raises:
            UserNameAlreadyExistsError: If the name is already registered
            DependencyError: If the database fails
        """
        orm_model = self.mapper.to_orm(user)
        self.db.add(orm_model)
        async with self._writing(user, "Failed to create user"):
            await self.db.flush()
            new_id = orm_model.id
            await self.db.commit()

        user.assign_id(UserId(new_id))
        logger.info(f"Created user with name: {user.name} (id={new_id})")
        return True

    async def update(self, user: User) -> bool:
        """
        Store the current state of an existing user.

        Args:
            user: The user entity to save

        Returns:
            True if the row was updated, False if it no longer exists

        Raises:
            UserNameAlreadyExistsError: If the new name is already registered
            DependencyError: If the database fails
        """
        orm_model = await self._find_orm(user.id)
        if not orm_model:
            return False

        self.mapper.to_orm(user, orm_model)
        async with self._writing(user, f"Failed to update user {user.id.value}"):
            await self.db.commit()
        logger.info(f"Updated user {user.id.value}")
        return True

    async def delete(self, user: User) -> bool:
        """
        Delete a user.

        Args:
            user: The user entity to delete

        Returns:
            True if the row was deleted, False if it no longer exists

        Raises:
            DependencyError: If the database fails
        """
        orm_model = await self._find_orm(user.id)
        if not orm_model:
            return False

        async with self._writing(user, f"Failed to delete user {user.id.value}"):
            await self.db.delete(orm_model)
            await self.db.commit()
        logger.info(f"Deleted user {user.id.value}")
        return True

    async def _find_orm(self, user_id: UserId) -> UserORM | None:
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise DependencyError(f"Failed to load user {user_id.value}", e) from e
        return result.scalar_one_or_none()

    @asynccontextmanager
    async def _writing(self, user: User, failure_message: str) -> AsyncIterator[None]:
        """Roll back and translate database errors raised inside the block."""
        try:
            yield
        except IntegrityError as e:
            await self.db.rollback()
            if _violates_name_uniqueness(e):
                raise UserNameAlreadyExistsError(user.name) from e
            raise DependencyError(failure_message, e) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DependencyError(failure_message, e) from e


# SQLite names the column, PostgreSQL names the constraint
_NAME_UNIQUE_MARKERS = ("UNIQUE constraint failed: users.name", '"users_name_key"')


def _violates_name_uniqueness(error: IntegrityError) -> bool:
    message = str(error.orig)
    return any(marker in message for marker in _NAME_UNIQUE_MARKERS)

from typing import Protocol

from user_registry.domain.common.value_objects.ids import UserId
from user_registry.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    async def get_all(self) -> list[User]: ...

    async def get_by_id(self, user_id: UserId) -> User | None: ...

    async def name_exists(self, name: str) -> bool: ...

    async def create(self, user: User) -> bool: ...

    async def update(self, user: User) -> bool: ...

    async def delete(self, user: User) -> bool: ...

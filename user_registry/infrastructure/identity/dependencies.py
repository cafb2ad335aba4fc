"""FastAPI dependencies for the identity context."""

from typing import Annotated

from fastapi import Depends

from user_registry.application.identity.services.user_service import UserService
from user_registry.core import container
from user_registry.database import DatabaseSession


async def get_user_service(db: DatabaseSession) -> UserService:
    """
    Build a user service bound to the request's database session.

    The session is handed to the providers per call; the shared container
    is never overridden.
    """
    user_repository = container.user_repository(db=db)
    return container.user_service(user_repository=user_repository)


UserServiceDependency = Annotated[UserService, Depends(get_user_service)]

from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.application.identity.services.user_service import UserService
from user_registry.infrastructure.identity.repositories.user_repository import UserRepository
from user_registry.infrastructure.logging.structlog_logger import StructlogLogger


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=AsyncSession)

    # Identity repositories
    user_repository = providers.Factory(UserRepository, db=db)

    # Cross-cutting services
    user_logger = providers.Singleton(StructlogLogger, name="user_registry.users")

    # Identity services
    user_service = providers.Factory(
        UserService,
        user_repository=user_repository,
        logger=user_logger,
    )


# Initialize container
container = Container()

import logging

from fastapi import APIRouter, HTTPException, status

from user_registry.application.identity.dtos import CreateUserRequest, UpdateUserRequest
from user_registry.domain.common.exceptions import ValidationError
from user_registry.domain.identity.exceptions import UserNameAlreadyExistsError, UserNotFoundError
from user_registry.exceptions import DependencyError
from user_registry.infrastructure.identity.dependencies import UserServiceDependency
from user_registry.infrastructure.identity.schemas import (
    MessageResponse,
    UserCreateRequest,
    UserDetailsResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(service: UserServiceDependency) -> list[UserDetailsResponse]:
    """List every registered user."""
    try:
        users = await service.list_all()
    except DependencyError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User storage is currently unavailable",
        ) from e
    except Exception as e:
        logger.error(f"Failed to list users: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
    return [UserDetailsResponse.from_domain(user) for user in users]


@router.post("")
async def create_user(
    service: UserServiceDependency, create_data: UserCreateRequest
) -> MessageResponse:
    """
    Register a new user.

    Field rules are enforced by the user service; every violated rule is
    reported in a single 400 response.
    """
    request = CreateUserRequest(
        name=create_data.name,
        age=create_data.age,
        date_of_birth=create_data.date_of_birth,
    )
    try:
        created = await service.create(request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from None
    except UserNameAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This name has already been registered",
        ) from None
    except DependencyError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User storage is currently unavailable",
        ) from e
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

    if not created:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An error was encountered during user registration",
        )
    return MessageResponse(message="User registration successful")


@router.put("/{user_id}")
async def update_user(
    user_id: int, service: UserServiceDependency, update_data: UserUpdateRequest
) -> MessageResponse:
    """Overwrite a user's name, age and date of birth."""
    request = UpdateUserRequest(
        id=user_id,
        name=update_data.name,
        age=update_data.age,
        date_of_birth=update_data.date_of_birth,
    )
    try:
        updated = await service.update(request)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id {user_id} not found",
        ) from None
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from None
    except UserNameAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This name has already been registered",
        ) from None
    except DependencyError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User storage is currently unavailable",
        ) from e
    except Exception as e:
        logger.error(f"Failed to update user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

    if not updated:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An error occurred during the user update process",
        )
    return MessageResponse(message="User update successful")


@router.delete("/{user_id}")
async def delete_user(user_id: int, service: UserServiceDependency) -> MessageResponse:
    """Delete a user by id."""
    try:
        deleted = await service.delete_by_id(user_id)
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id {user_id} not found",
        ) from None
    except DependencyError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User storage is currently unavailable",
        ) from e
    except Exception as e:
        logger.error(f"Failed to delete user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An error occurred while deleting the user",
        )
    return MessageResponse(message="User deleted successfully")

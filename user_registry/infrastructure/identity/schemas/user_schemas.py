from datetime import date

from pydantic import BaseModel, Field

from user_registry.domain.identity.entities.user import User


class UserBase(BaseModel):
    name: str = Field(..., description="Display name, unique across users")
    age: int = Field(..., description="Age in years")
    date_of_birth: date = Field(..., description="Date of birth (YYYY-MM-DD)")


class UserCreateRequest(UserBase):
    """Schema for registering a user."""


class UserUpdateRequest(UserBase):
    """Schema for overwriting a user's details."""


class UserDetailsResponse(UserBase):
    """Schema for returning user details."""

    id: int = Field(..., description="User id")

    @classmethod
    def from_domain(cls, user: User) -> "UserDetailsResponse":
        return cls(
            id=user.id.value,
            name=user.name,
            age=user.age,
            date_of_birth=user.date_of_birth,
        )


class MessageResponse(BaseModel):
    """Outcome message for write operations."""

    message: str

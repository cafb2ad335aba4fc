from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class CreateUserRequest:
    """Input DTO for registering a new user."""

    name: str
    age: int
    date_of_birth: date


@dataclass(frozen=True, slots=True)
class UpdateUserRequest:
    """Input DTO for overwriting an existing user's details."""

    id: int
    name: str
    age: int
    date_of_birth: date

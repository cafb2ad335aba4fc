"""
Field rules for incoming user requests.

Every rule is evaluated on every call; a request with three bad fields
yields three errors. The validators hold no state and can be shared
freely between concurrent requests.

Example:
    result = validate_create_user_request(request)
    if not result.is_valid:
        raise ValidationError(result.join(", "), errors=result.messages)
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from user_registry.application.identity.dtos import CreateUserRequest, UpdateUserRequest
from user_registry.domain.identity.entities.user import MAX_AGE, MIN_AGE


@dataclass(frozen=True)
class FieldError:
    """A single violated rule."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one request."""

    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def join(self, separator: str) -> str:
        return separator.join(self.messages)


def validate_create_user_request(
    request: CreateUserRequest, today: date | None = None
) -> ValidationResult:
    """
    Validate a registration request.

    Args:
        request: The request to check
        today: Reference date for the date of birth rule (defaults to today)

    Returns:
        ValidationResult listing every violated rule
    """
    return ValidationResult(
        errors=tuple(_user_field_errors(request.name, request.age, request.date_of_birth, today))
    )


def validate_update_user_request(
    request: UpdateUserRequest, today: date | None = None
) -> ValidationResult:
    """
    Validate an update request.

    The id is not checked here; the user service resolves it against
    the repository before validating.

    Args:
        request: The request to check
        today: Reference date for the date of birth rule (defaults to today)

    Returns:
        ValidationResult listing every violated rule
    """
    return ValidationResult(
        errors=tuple(_user_field_errors(request.name, request.age, request.date_of_birth, today))
    )


def _user_field_errors(
    name: object, age: object, date_of_birth: object, today: date | None
) -> list[FieldError]:
    errors: list[FieldError] = []
    errors.extend(_name_errors(name))
    errors.extend(_age_errors(age))
    errors.extend(_date_of_birth_errors(date_of_birth, today or date.today()))
    return errors


def _name_errors(name: object) -> list[FieldError]:
    if not isinstance(name, str) or not name.strip():
        return [FieldError("name", "Name must not be empty")]
    return []


def _age_errors(age: object) -> list[FieldError]:
    # bool is an int subclass
    if not isinstance(age, int) or isinstance(age, bool):
        return [FieldError("age", "Age must be a whole number")]
    if age < MIN_AGE:
        return [FieldError("age", f"Age must be at least {MIN_AGE}")]
    if age > MAX_AGE:
        return [FieldError("age", f"Age must not exceed {MAX_AGE}")]
    return []


def _date_of_birth_errors(date_of_birth: object, today: date) -> list[FieldError]:
    if not isinstance(date_of_birth, date) or isinstance(date_of_birth, datetime):
        return [FieldError("date_of_birth", "Date of birth must be a valid date")]
    if date_of_birth > today:
        return [FieldError("date_of_birth", "Date of birth must not be in the future")]
    return []

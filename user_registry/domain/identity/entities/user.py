"""User entity for identity management."""

from dataclasses import dataclass
from datetime import date

from user_registry.domain.common.entity import Entity
from user_registry.domain.common.exceptions import ValidationError
from user_registry.domain.common.value_objects.ids import UserId

# Domain constraints
MIN_AGE = 1
MAX_AGE = 150


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing a registered person.

    Business Rules:
    - Name must be unique (checked by the user service, enforced at repository level)
    - Name must be non-empty
    - Identity is assigned by the repository on creation and never changes afterwards
    """

    id: UserId
    name: str
    age: int
    date_of_birth: date

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Name cannot be empty", field="name", value=self.name)

    def update_details(self, name: str, age: int, date_of_birth: date) -> None:
        """
        Overwrite the mutable fields of the user.

        Args:
            name: The new display name
            age: The new age
            date_of_birth: The new date of birth

        Raises:
            ValidationError: If name is empty
        """
        if not name or not name.strip():
            raise ValidationError("Name cannot be empty", field="name", value=name)
        self.name = name
        self.age = age
        self.date_of_birth = date_of_birth

    def assign_id(self, user_id: UserId) -> None:
        """Record the identity the repository generated for a new user."""
        if self.id.is_assigned:
            raise ValueError(f"User already has id {self.id}")
        self.id = user_id

    @property
    def persisted_id(self) -> int | None:
        """The repository-assigned id, or None while the user is unsaved."""
        return self.id.value if self.id.is_assigned else None

    @classmethod
    def create(cls, name: str, age: int, date_of_birth: date) -> "User":
        """
        Create a new, not yet persisted user.

        Args:
            name: User's display name
            age: User's age in years
            date_of_birth: User's date of birth

        Returns:
            New User instance with a placeholder id

        Raises:
            ValidationError: If name is empty
        """
        return cls(
            id=UserId.generate(),
            name=name,
            age=age,
            date_of_birth=date_of_birth,
        )

    @classmethod
    def create_with_id(cls, id: UserId, name: str, age: int, date_of_birth: date) -> "User":
        """
        Reconstitute a user from persistence.

        Args:
            id: Existing user ID
            name: User's display name
            age: User's age in years
            date_of_birth: User's date of birth

        Returns:
            Reconstituted User instance
        """
        return cls(id=id, name=name, age=age, date_of_birth=date_of_birth)

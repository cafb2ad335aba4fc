"""
Errors raised when a request breaks a domain rule.

They carry a human-readable message plus structured details. The HTTP
layer maps each kind to a status code; the service layer lets them
through untouched.
"""


class DomainError(Exception):
    """Root of every domain rule violation."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} - {self.details}"


class ValidationError(DomainError):
    """
    One or more field rules were violated.

    `message` is the violations joined into a single line (or lines);
    `errors` keeps them apart so callers don't have to split the text.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
        errors: list[str] | None = None,
    ) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value
        self.errors = errors if errors is not None else [message]


class EntityNotFoundError(DomainError):
    """No stored entity has the requested id."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConflictError(DomainError):
    """The write would duplicate a value that must stay unique."""

"""Infrastructure-level exceptions."""


class DependencyError(Exception):
    """
    Raised by an adapter when the backing service fails.

    Services pass it through unchanged; the HTTP layer reports it as
    503 Service Unavailable.

    Attributes:
        message: Human-readable error description.
        original_error: The underlying driver or ORM error.
    """

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message

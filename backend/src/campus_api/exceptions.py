"""Domain exceptions raised by services.

Services raise these when a precondition fails or a lookup comes back
empty. The exception handlers in main.py map each kind to an HTTP status
and the standard error body: {"message": ..., "timestamp": ..., "status": ...}.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(DomainError):
    """Raised when a caller-supplied identifier or payload violates a precondition."""

    def __init__(self, message: str = "Invalid input provided") -> None:
        super().__init__(message)


class ResourceNotFoundError(DomainError):
    """Raised when a well-formed lookup key has no matching record."""

    def __init__(self, entity: str, identifier: object, field: str = "id") -> None:
        self.entity = entity
        self.identifier = identifier
        self.field = field
        super().__init__(f"{entity} with {field} {identifier} not found")

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedInputError(ValidationError):
    """Raised when the timesheet engine receives arguments it cannot pair."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or time log does not exist."""

    def __init__(self, resource: str, resource_id: object):
        super().__init__(f"{resource} not found with id: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(DomainError):
    """Raised when a write collides with an existing record."""

"""PMO: Error taxonomy shared by the query validator, access policy and services."""
from fastapi import status


class PMOError(Exception):
    """Base for errors rendered as a structured error payload."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, field_errors: dict[str, str] | None = None):
        self.message = message
        self.field_errors = field_errors or {}
        super().__init__(message)


class ValidationError(PMOError):
    """Malformed or out-of-range input. Carries per-field messages."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message, {field: message})

    @classmethod
    def from_field_errors(cls, field_errors: dict[str, str]) -> "ValidationError":
        return cls("; ".join(field_errors.values()), field_errors)


class AuthenticationError(PMOError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTHENTICATION_REQUIRED"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class AuthorizationError(PMOError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"


class NotFoundError(PMOError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class ConflictError(PMOError):
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"

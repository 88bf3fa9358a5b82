"""Service error taxonomy.

Every failure a service operation can report maps to exactly one ErrorCode
and one HTTP status. Errors raised by a collaborator service are re-raised
as-is, so status and message reach the client unchanged.
"""

from enum import Enum


class ErrorCode(Enum):
    """Service error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ServiceError(Exception):
    """Base service error with code, HTTP status and user-safe detail."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500

    def __init__(self, detail) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.code.value}: {self.detail}"


class ValidationFailedError(ServiceError):
    """Raised when input violates one or more field rules.

    ``detail`` is the ordered list of ``{field: message}`` objects.
    """

    code = ErrorCode.VALIDATION_FAILED
    status_code = 422

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__(list(errors))

    @property
    def errors(self) -> list[dict[str, str]]:
        return self.detail


class NotFoundError(ServiceError):
    code = ErrorCode.NOT_FOUND
    status_code = 404


class ConflictError(ServiceError):
    code = ErrorCode.CONFLICT
    status_code = 409


class BusinessRuleError(ServiceError):
    code = ErrorCode.BUSINESS_RULE_VIOLATION
    status_code = 400


class InternalError(ServiceError):
    code = ErrorCode.INTERNAL_ERROR
    status_code = 500

"""Typed errors raised by back-office operations.

Every error carries a machine-readable ``code`` and the HTTP ``status_code``
the API layer renders it with, so callers catch by type and clients branch on
``code`` rather than parsing messages.

    BackofficeError
    |
    +-- ValidationError        400  missing/malformed field (``field`` set)
    +-- AuthenticationError    401  missing/invalid token or bad credentials
    +-- ForbiddenError         403  role check failed (incl. finalize rule)
    +-- NotFoundError          404  record/line item/inventory item missing
    +-- ConflictError          409  duplicate date or other unique violation
    +-- DependencyFailure      500  store unreachable or query failed
        +-- ReferencedDataError  409  foreign key blocks a delete
"""

from typing import Any, Optional


class BackofficeError(Exception):
    """Base class for all back-office errors."""

    code: str = "BACKOFFICE_ERROR"
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code}


class ValidationError(BackofficeError):
    """A required field is missing or malformed."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        if self.field is not None:
            out["field"] = self.field
        return out


class AuthenticationError(BackofficeError):
    code = "AUTHENTICATION_REQUIRED"
    status_code = 401


class ForbiddenError(BackofficeError):
    code = "FORBIDDEN"
    status_code = 403


class NotFoundError(BackofficeError):
    code = "NOT_FOUND"
    status_code = 404


class ConflictError(BackofficeError):
    code = "CONFLICT"
    status_code = 409


class DependencyFailure(BackofficeError):
    """The data store failed for a reason other than the typed cases above."""

    code = "DEPENDENCY_FAILURE"
    status_code = 500


class ReferencedDataError(DependencyFailure):
    """Delete blocked because other rows still reference the target."""

    code = "REFERENCED_DATA"
    status_code = 409

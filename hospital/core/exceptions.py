"""
Error Taxonomy
==============

Every failure raised by the domain and application layers carries an
``ErrorKind``. The API layer turns kinds into HTTP status codes using
``ERROR_STATUS_CODES`` and never inspects message text.
"""
from enum import Enum
from typing import Dict


class ErrorKind(str, Enum):
    """Closed set of failure categories."""
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    CONFLICT = "conflict"
    INTERNAL = "internal"


# Business-rule conflicts surface as 400 like validation failures.
ERROR_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.INTERNAL: 500,
}


class HospitalError(Exception):
    """Base exception for hospital operations."""
    
    kind: ErrorKind = ErrorKind.INTERNAL
    
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
    
    @property
    def status_code(self) -> int:
        return ERROR_STATUS_CODES[self.kind]


class NotFoundError(HospitalError):
    """Raised when an entity cannot be located."""
    
    kind = ErrorKind.NOT_FOUND


class InvalidInputError(HospitalError):
    """Raised when input is missing or malformed."""
    
    kind = ErrorKind.VALIDATION_FAILED


class ConflictError(HospitalError):
    """Raised when a business rule rejects the operation (duplicates, unavailable slots)."""
    
    kind = ErrorKind.CONFLICT

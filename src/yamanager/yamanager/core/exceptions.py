from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingFieldError(ValidationError):
    """Raised when a confirmed dialog result lacks a required field."""

    message_key = "error.missingField"

    def __init__(self, fields: Sequence[str]):
        super().__init__(f"Missing required field(s): {', '.join(fields)}")
        self.fields = tuple(fields)


class DataIntegrityError(DomainError):
    """Raised when data received from a collaborator cannot be trusted."""


class MalformedDateError(DataIntegrityError):
    """Raised when a calendar entry carries an unparsable date."""

    def __init__(self, value: object, employee_id: Optional[int] = None):
        where = f" for employee {employee_id}" if employee_id is not None else ""
        super().__init__(f"Malformed date {value!r}{where}")
        self.value = value
        self.employee_id = employee_id


class TransportError(DomainError):
    """Raised when a round-trip to an external collaborator fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

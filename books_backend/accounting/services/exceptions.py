# accounting/services/exceptions.py

"""
ACCOUNTING SERVICE ERRORS

Centralized domain errors for the document engine (numbering, conversion,
settlement, reporting).

Every error carries:
- code: stable machine-readable identifier (returned to API clients)
- status_code: HTTP status the API layer maps it to

Raised inside a transaction.atomic() block, any of these rolls the whole
unit of work back.
"""

from __future__ import annotations


class AccountingServiceError(Exception):
    """Base exception for all accounting service failures."""

    code = "accounting_error"
    status_code = 400

    def as_payload(self) -> dict:
        return {"detail": str(self), "code": self.code}


class DocumentValidationError(AccountingServiceError):
    """Raised when a document or one of its lines fails validation."""

    code = "validation_error"
    status_code = 400

    def __init__(self, message: str, *, field: str | None = None, line_index: int | None = None):
        super().__init__(message)
        self.field = field
        self.line_index = line_index

    def as_payload(self) -> dict:
        payload = super().as_payload()
        if self.field is not None:
            payload["field"] = self.field
        if self.line_index is not None:
            payload["line"] = self.line_index
        return payload


class NotFoundError(AccountingServiceError):
    """Raised when a referenced entity (document, partner, catalog entry) is missing."""

    code = "not_found"
    status_code = 404

    def __init__(self, entity: str, key):
        super().__init__(f"{entity} '{key}' not found")
        self.entity = entity
        self.key = key

    def as_payload(self) -> dict:
        payload = super().as_payload()
        payload["entity"] = self.entity
        payload["key"] = str(self.key)
        return payload


class AlreadySettledError(AccountingServiceError):
    """Raised when a bill that is already paid is settled again."""

    code = "already_settled"


class InvalidAccountError(AccountingServiceError):
    """Raised when a settlement account is missing or not an Assets account."""

    code = "invalid_account"


class InvalidTransitionError(AccountingServiceError):
    """Raised when a document lifecycle transition is not allowed."""

    code = "invalid_transition"


class DuplicateNumberError(AccountingServiceError):
    """Raised when two writers race for the same document number."""

    code = "duplicate_number"
    status_code = 409


class PersistenceError(AccountingServiceError):
    """Raised when storage fails underneath a service operation."""

    code = "persistence_error"
    status_code = 500


class NumberingIntegrityError(PersistenceError):
    """Raised when a stored document number does not match its series format."""


def from_django_validation(exc, *, line_index: int | None = None) -> DocumentValidationError:
    """
    Translate a django.core.exceptions.ValidationError raised by a model's
    full_clean() into a DocumentValidationError naming the first bad field.
    """
    error_dict = getattr(exc, "error_dict", None)
    if error_dict:
        field, errors = next(iter(error_dict.items()))
        message = "; ".join(m for e in errors for m in e.messages)
        if field == "__all__":
            field = None
        return DocumentValidationError(message, field=field, line_index=line_index)

    return DocumentValidationError("; ".join(exc.messages), line_index=line_index)

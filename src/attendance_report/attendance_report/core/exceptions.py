class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedRecordError(DomainError):
    """Raised when a raw attendance entry lacks required nested fields."""

    def __init__(self, entry_id, reason: str = "missing student.person"):
        self.entry_id = entry_id
        self.reason = reason
        super().__init__(f"Malformed attendance record {entry_id!r}: {reason}")


class EmptyInputError(DomainError):
    """Raised when a report is requested for zero rows."""


class RenderError(DomainError):
    """Raised when the document canvas fails while drawing or saving."""

"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StorageError(DomainError):
    """Durable storage could not be read or written."""


class ImportFormatError(ValidationError):
    """Backup payload is malformed and was rejected as a whole."""


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry '{entry_id}' not found"


def negative_value(field_name: str, value: float) -> str:
    """Return message for a negative spend or purchases value."""
    return f"{field_name.capitalize()} cannot be negative (got {value})"


def non_finite_value(field_name: str, value: float) -> str:
    """Return message for an infinite or NaN spend or purchases value."""
    return f"{field_name.capitalize()} must be a finite number (got {value})"


def invalid_day(value: object) -> str:
    """Return message for a value that is not a YYYY-MM-DD day."""
    return f"Invalid date '{value}': expected YYYY-MM-DD"


def unknown_choice(kind: str, value: object) -> str:
    """Return message for an unrecognized project or platform."""
    return f"Unknown {kind} '{value}'"


def storage_write_failed(action: str, error: Exception) -> str:
    """Return message when persisting a change fails."""
    return f"Could not {action}: storage write failed ({error})"


def import_element_invalid(index: int, reason: str) -> str:
    """Return message for an invalid backup element."""
    return f"Invalid backup file: element {index} {reason}"

"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidFilenameError(ValidationError):
    """Upload filename does not encode a valid (month, year) period."""


class MissingColumnsError(ValidationError):
    """Export lacks the columns needed to identify accounts."""


class ConfigurationError(ValidationError):
    """Settings cannot be used as given."""


class MalformedRowError(DomainError):
    """A single export row could not be parsed."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StoreWriteFailure(DomainError):
    """Persisting merged ledger data failed; nothing was merged."""


def invalid_filename(filename: str) -> str:
    """Return message for a filename that does not match the export pattern."""
    return (
        f"Filename '{filename}' does not match the expected format "
        "Saldenliste-MM-YYYY.csv"
    )


def invalid_month(filename: str, month: int) -> str:
    """Return message for a filename with a month outside 1-12."""
    return f"Filename '{filename}' has invalid month {month:02d} (expected 01-12)"


def missing_columns(columns: list[str]) -> str:
    """Return message for an export without required columns."""
    return f"Export missing required columns: {', '.join(columns)}"


def malformed_amount(column: str, value: str) -> str:
    """Return message for an unparsable numeric field."""
    return f"Could not parse {column} value '{value}'"


def store_write_failed(filename: str, error: Exception) -> str:
    """Return message when persisting an upload fails."""
    return f"Could not store upload '{filename}': {error}"


def no_batches() -> str:
    """Return message when a default period is needed but nothing is uploaded."""
    return "No uploads found. Import a Saldenliste first."

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


class InvalidFrequencyError(ValidationError):
    """Pay frequency is not one of the recognized values."""


class InvalidArgumentError(ValidationError):
    """Caller supplied a malformed argument."""


class InvalidScheduleError(ValidationError):
    """Pay schedule cannot produce a terminating set of periods."""


class MissingScheduleError(NotFoundError):
    """No pay schedule has been configured."""


class EmptyInputError(DomainError):
    """An aggregate was requested over an empty input."""


class DataAccessError(RuntimeError):
    """A storage query failed while gathering analysis inputs."""

    def __init__(self, query: str, error: BaseException):
        self.query = query
        self.error = error
        super().__init__(f"Query '{query}' failed: {error}")


def pay_schedule_not_configured() -> str:
    """Return message for missing pay schedule."""
    return "Pay schedule not configured. Please set up your pay schedule first."


def invalid_frequency(value: object) -> str:
    """Return message for unrecognized pay frequency."""
    return f"Frequency must be either \"weekly\" or \"biweekly\", got {value!r}"


def invalid_periods_requested(value: object) -> str:
    """Return message for a non-positive period count."""
    return f"Number of periods must be a positive integer, got {value!r}"


def budget_category_not_found(category_id: int) -> str:
    """Return message for missing budget category."""
    return f"Budget category {category_id} not found"

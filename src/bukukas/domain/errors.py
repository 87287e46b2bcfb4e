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


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class InvalidPeriod(ValidationError):
    """Period selector has an out-of-range month, year or window."""


class InvalidTransaction(ValidationError):
    """Transaction violates a precondition of the aggregation engine."""


def business_not_found(business_id: str) -> str:
    """Return message for missing business by ID."""
    return f"Business {business_id} not found"


def business_name_not_found(name: str) -> str:
    """Return message for missing business by name."""
    return f"Business '{name}' not found"


def business_name_ambiguous(name: str, matches: list[str]) -> str:
    """Return message when a partial name matches several businesses."""
    return f"Business name '{name}' is ambiguous: matches {', '.join(sorted(matches))}"


def duplicate_business_name(name: str) -> str:
    """Return message for duplicate business name."""
    return f"Business with name '{name}' already exists"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def invalid_month(month: object) -> str:
    """Return message for a month outside 1..12."""
    return f"Month must be between 1 and 12, got {month!r}"


def invalid_year(year: object) -> str:
    """Return message for a year outside the supported calendar."""
    return f"Year must be between 1 and 9999, got {year!r}"


def invalid_category(kind: str, category: object) -> str:
    """Return message for a category that does not belong to the kind."""
    return f"Category {category!r} is not a valid {kind} category"


def business_delete_blocked(business_id: str, transaction_count: int) -> str:
    """Return message when a business still owns transactions."""
    return (
        f"Cannot delete business {business_id}: it has "
        f"{transaction_count} transaction{'s' if transaction_count != 1 else ''}. "
        "Please delete them first."
    )


def work_day_not_found(work_day_id: str) -> str:
    """Return message for missing work-day record."""
    return f"Work day {work_day_id} not found"


def duplicate_work_day(employee_name: str, work_date: object) -> str:
    """Return message when an employee already has a work day on a date."""
    return f"Work day for '{employee_name}' on {work_date} is already recorded"


def business_delete_blocked_by_work_days(business_id: str, work_day_count: int) -> str:
    """Return message when a business still has employee work days."""
    return (
        f"Cannot delete business {business_id}: it has "
        f"{work_day_count} work day{'s' if work_day_count != 1 else ''} recorded. "
        "Please delete them first."
    )

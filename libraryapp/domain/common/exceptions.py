"""
Domain layer exceptions.

Every rule the domain refuses to break surfaces as one of these types.
Services let them propagate; the HTTP layer maps each family to a status code.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Carries a human-readable message plus structured details for logging.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when input is malformed.

    Example: an empty user name or a negative age.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when a referenced entity does not exist.

    Example: loaning a book to a user name nobody is registered under.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a request is well-formed but a business rule forbids it.

    Example: loaning a book title that is already out on loan.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class InvariantViolationError(DomainError):
    """
    Raised when an operation would leave an entity in an illegal state.

    Example: returning a loan history that is already returned.
    """

    def __init__(self, aggregate: str, invariant: str) -> None:
        message = f"Invariant violation in {aggregate}: {invariant}"
        super().__init__(message, {"aggregate": aggregate, "invariant": invariant})
        self.aggregate = aggregate
        self.invariant = invariant

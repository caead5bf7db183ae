class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class BusinessRuleError(DomainError):
    """Raised when a valid request is refused by a business rule."""


class AuthenticationError(DomainError):
    """Raised when login credentials or a bearer token are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""


class ReportNotImplementedError(DomainError):
    """Raised when no generator is registered for a report subject/format."""

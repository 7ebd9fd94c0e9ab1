class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record does not exist."""


class NoDataError(DomainError):
    """Raised when an export or report has nothing to show."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AIAssistError(DomainError):
    """Raised when the AI gateway fails or returns unusable output."""


class StoreError(Exception):
    """Raised when the database cannot complete an operation."""

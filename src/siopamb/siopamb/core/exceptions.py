class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid.

    Unknown user and wrong password raise the same message.
    """


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotAuthenticatedError(AuthorizationError):
    """Raised when an operation needs an active session and there is none."""


class DuplicateNameError(ValidationError):
    """Raised when a display name (nome de guerra) is already taken."""


class PasswordMismatchError(ValidationError):
    """Raised when password and confirmation differ."""


class PasswordTooShortError(ValidationError):
    """Raised when a password is shorter than the configured minimum."""


class NotFoundError(DomainError):
    """Raised when an account does not exist."""

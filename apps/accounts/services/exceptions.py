"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """
    Base exception for accounts services.

    Carries an error ``code`` from :class:`AuthErrorCode` so views can
    answer with the matching user-facing message.
    """

    code = 'unknown'

    def __init__(self, message='', code=None):
        super().__init__(message)
        if code is not None:
            self.code = code


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    code = 'registration-failed'


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    code = 'invalid-credential'


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    code = 'user-disabled'


class PlanLimitExceededError(AccountsServiceError):
    """Raised when a free account tries to go over its plan caps."""
    code = 'plan-limit-exceeded'

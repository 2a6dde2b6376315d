"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    PlanLimitExceededError,
)
from .error_messages import AuthErrorCode, auth_error_message
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import update_display_name, upgrade_to_pro
from .plan_limits import (
    PlanResource,
    get_plan_limit,
    lock_account,
    check_plan_limit,
    get_plan_usage,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'PlanLimitExceededError',
    # Error messages
    'AuthErrorCode',
    'auth_error_message',
    # Services
    'register_user',
    'authenticate_user',
    'update_display_name',
    'upgrade_to_pro',
    # Plan limits
    'PlanResource',
    'get_plan_limit',
    'lock_account',
    'check_plan_limit',
    'get_plan_usage',
]

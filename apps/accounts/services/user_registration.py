"""User registration service."""

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
import logging

from .error_messages import AuthErrorCode
from .exceptions import UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = ""
) -> User:
    """
    Register a new shop account on the free plan.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        display_name: Optional display name

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is taken or the password is weak
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError(
            "Email already registered",
            code=AuthErrorCode.EMAIL_ALREADY_IN_USE,
        )

    try:
        validate_password(password, user=User(email=email, display_name=display_name))
    except ValidationError as e:
        raise UserRegistrationError(
            "; ".join(e.messages),
            code=AuthErrorCode.WEAK_PASSWORD,
        )

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            display_name=display_name
        )
    except IntegrityError:
        # Concurrent registration with the same email
        raise UserRegistrationError(
            "Email already registered",
            code=AuthErrorCode.EMAIL_ALREADY_IN_USE,
        )

    logger.info("Registered account %s", user.id)
    return user

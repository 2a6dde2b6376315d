"""Account management service: profile updates and plan tier."""

from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID
import logging

from ..models import Plan

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def update_display_name(*, user_id: UUID, display_name: str) -> User:
    """Change the account's display name."""
    user = User.objects.select_for_update().get(id=user_id)
    user.display_name = display_name.strip()
    user.save(update_fields=['display_name', 'updated_at'])
    return user


@transaction.atomic
def upgrade_to_pro(*, user_id: UUID) -> User:
    """
    Move the account to the Pro plan after the user returns from checkout.

    The checkout happens on an external payment page and no receipt is
    verified here: returning to the post-upgrade route is taken as proof
    of payment. Calling it on a Pro account is a no-op.

    Args:
        user_id: Account UUID

    Returns:
        The (possibly unchanged) User instance
    """
    user = User.objects.select_for_update().get(id=user_id)

    if user.plan == Plan.PRO:
        return user

    user.upgrade_to_pro()
    logger.info("Account %s upgraded to pro", user.id)
    return user

"""Free-plan caps on service orders and customers."""

from django.conf import settings
from django.contrib.auth import get_user_model
import logging

from ..models import Plan
from .exceptions import PlanLimitExceededError

User = get_user_model()
logger = logging.getLogger(__name__)


class PlanResource:
    ORDERS = 'orders'
    CUSTOMERS = 'customers'


LIMIT_MESSAGES = {
    PlanResource.ORDERS: (
        "Limite do Plano Gratuito atingido: Máximo de {limit} OS. "
        "Faça upgrade para o Pro!"
    ),
    PlanResource.CUSTOMERS: (
        "Limite do Plano Gratuito atingido: Máximo de {limit} Clientes. "
        "Faça upgrade para o Pro!"
    ),
}


def get_plan_limit(plan, resource):
    """Return the cap for ``resource`` on ``plan``, or None when unlimited."""
    if plan != Plan.FREE:
        return None
    if resource == PlanResource.ORDERS:
        return settings.FREE_PLAN_ORDER_LIMIT
    if resource == PlanResource.CUSTOMERS:
        return settings.FREE_PLAN_CUSTOMER_LIMIT
    raise ValueError(f"Unknown plan resource: {resource}")


def lock_account(account_id):
    """
    Lock the account row for the rest of the current transaction.

    Must be called inside ``transaction.atomic``. Concurrent creates for the
    same account serialize on this lock, so the count taken afterwards is
    the one the limit check sees.
    """
    return User.objects.select_for_update().get(id=account_id)


def check_plan_limit(*, account, resource, current_count):
    """
    Reject the create when the account is already at its plan cap.

    Raises:
        PlanLimitExceededError: If the free-plan cap is reached
    """
    limit = get_plan_limit(account.plan, resource)
    if limit is None or current_count < limit:
        return

    logger.warning(
        "Plan limit reached for account %s: %s=%s (limit %s)",
        account.id, resource, current_count, limit,
    )
    raise PlanLimitExceededError(LIMIT_MESSAGES[resource].format(limit=limit))


def get_plan_usage(account):
    """Return plan, caps and current counts for the account."""
    orders_count = account.service_orders.count()
    customers_count = account.customers.count()

    return {
        'plan': account.plan,
        'limits': {
            'orders': get_plan_limit(account.plan, PlanResource.ORDERS),
            'customers': get_plan_limit(account.plan, PlanResource.CUSTOMERS),
        },
        'usage': {
            'orders': orders_count,
            'customers': customers_count,
        },
        'upgrade_url': settings.PRO_UPGRADE_URL if account.plan == Plan.FREE else None,
    }

"""Service order management - create, update, complete and delete orders."""

from django.db import transaction
from django.db.models import QuerySet, Q
from django.utils import timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID
import logging

from apps.accounts.models import User
from apps.accounts.services import PlanResource, lock_account, check_plan_limit
from apps.customers.models import Customer
from ..models import ServiceOrder, OrderStatus, OrderPriority
from .exceptions import OrderNotFoundError, CustomerNotFoundError
from .status_rules import resolve_status, validate_progress, PROGRESS_COMPLETE

logger = logging.getLogger(__name__)

ORDER_UPDATABLE_FIELDS = (
    'customer_name',
    'device',
    'problem',
    'serial',
    'imei',
    'priority',
    'technician',
    'labor_value',
    'parts_value',
)


def _money(value) -> Decimal:
    if value is None or value == '':
        return Decimal('0.00')
    return Decimal(str(value))


def _resolve_customer(owner: User, customer_id: Optional[UUID], customer_name: str) -> Optional[Customer]:
    """
    Find the order's customer within the account.

    An explicit id must exist; otherwise the customer is matched by exact
    name, and an unknown name is allowed (walk-in without a record).
    """
    if customer_id:
        try:
            return Customer.objects.select_for_update().get(id=customer_id, owner=owner)
        except Customer.DoesNotExist:
            raise CustomerNotFoundError("Cliente não encontrado.")

    if customer_name:
        return (
            Customer.objects
            .select_for_update()
            .filter(owner=owner, name=customer_name)
            .first()
        )
    return None


def get_order(*, owner: User, order_id: UUID, for_update: bool = False) -> ServiceOrder:
    """
    Raises:
        OrderNotFoundError: If the order is missing or owned by another account
    """
    queryset = ServiceOrder.objects.filter(owner=owner)
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=order_id)
    except ServiceOrder.DoesNotExist:
        raise OrderNotFoundError("OS não encontrada.")


def get_account_orders(
    *,
    owner: User,
    status: Optional[str] = None,
    customer_id: Optional[UUID] = None,
    search: str = '',
) -> QuerySet:
    """Account's orders, newest first, optionally filtered."""
    queryset = ServiceOrder.objects.filter(owner=owner).select_related('customer')

    if status:
        queryset = queryset.filter(status=status)
    if customer_id:
        queryset = queryset.filter(customer_id=customer_id)
    if search:
        queryset = queryset.filter(Q(customer_name__icontains=search) | Q(device__icontains=search))

    return queryset.order_by('-created_at')


@transaction.atomic
def create_order(
    *,
    owner: User,
    device: str,
    customer_name: str = '',
    customer_id: Optional[UUID] = None,
    problem: str = '',
    serial: str = '',
    imei: str = '',
    priority: str = OrderPriority.MEDIUM,
    technician: str = '',
    labor_value=None,
    parts_value=None,
) -> ServiceOrder:
    """
    Open a new service order.

    This operation runs in one transaction:
    1. Locks the account and enforces the free-plan order cap
    2. Resolves the customer (by id, or by name within the account)
    3. Creates the order in Received with progress 0 and
       value = labor_value + parts_value
    4. Touches the customer's last visit

    Any failure rolls back every step.

    Args:
        owner: Account opening the order
        device: Device model
        customer_name: Customer display name (taken from the customer when
            customer_id is given)
        customer_id: Existing customer UUID
        problem: Reported defect
        serial: Serial number
        imei: IMEI
        priority: OrderPriority value
        technician: Assigned technician name
        labor_value: Labor charge
        parts_value: Parts charge

    Returns:
        Created ServiceOrder instance

    Raises:
        PlanLimitExceededError: If a free account already has the maximum orders
        CustomerNotFoundError: If customer_id is not a customer of the account
    """
    account = lock_account(owner.id)
    check_plan_limit(
        account=account,
        resource=PlanResource.ORDERS,
        current_count=ServiceOrder.objects.filter(owner=account).count(),
    )

    customer = _resolve_customer(account, customer_id, customer_name)
    if customer is not None:
        customer_name = customer.name

    labor = _money(labor_value)
    parts = _money(parts_value)

    order = ServiceOrder.objects.create(
        owner=account,
        customer=customer,
        customer_name=customer_name,
        device=device,
        problem=problem,
        serial=serial,
        imei=imei,
        priority=priority,
        technician=technician or '',
        status=OrderStatus.RECEIVED,
        progress=0,
        labor_value=labor,
        parts_value=parts,
        value=labor + parts,
    )

    if customer is not None:
        customer.last_visit = timezone.now()
        customer.save(update_fields=['last_visit', 'updated_at'])

    logger.info("Account %s opened service order %s", account.id, order.id)
    return order


@transaction.atomic
def update_order(*, owner: User, order_id: UUID, **changes) -> ServiceOrder:
    """
    Apply a partial update to a service order.

    ``value`` is always recomputed from labor and parts. When ``progress``
    is part of the update the status follows :func:`resolve_status`; an
    explicit ``status`` is honored unless the progress rule overrides it.
    A new ``customer_name`` without ``customer_id`` relinks the order to
    the account's customer of that name, or unlinks it when none matches.

    Args:
        owner: Account owning the order
        order_id: Order UUID
        **changes: Any of the editable fields plus ``status``, ``progress``
            and ``customer_id``

    Returns:
        Updated ServiceOrder instance

    Raises:
        OrderNotFoundError: If the order doesn't exist in the account
        CustomerNotFoundError: If customer_id is not a customer of the account
        InvalidProgressError: If progress is outside 0-100
    """
    order = get_order(owner=owner, order_id=order_id, for_update=True)
    previous_name = order.customer_name

    progress = changes.get('progress')
    validate_progress(progress)

    for name in ORDER_UPDATABLE_FIELDS:
        if name in changes:
            value = changes[name]
            if name in ('labor_value', 'parts_value'):
                value = _money(value)
            elif name == 'technician':
                value = value or ''
            setattr(order, name, value)

    if 'customer_id' in changes:
        customer = _resolve_customer(owner, changes['customer_id'], '') if changes['customer_id'] else None
        order.customer = customer
        if customer is not None:
            order.customer_name = customer.name
    elif order.customer_name != previous_name:
        order.customer = _resolve_customer(owner, None, order.customer_name)

    order.value = order.labor_value + order.parts_value

    order.status = resolve_status(
        order.status,
        progress=progress,
        requested_status=changes.get('status'),
    )
    if progress is not None:
        order.progress = progress

    order.save()
    logger.info("Account %s updated service order %s (status=%s)", owner.id, order.id, order.status)
    return order


def complete_order(*, owner: User, order_id: UUID) -> ServiceOrder:
    """Mark the order as done: progress 100, status Ready."""
    return update_order(
        owner=owner,
        order_id=order_id,
        progress=PROGRESS_COMPLETE,
        status=OrderStatus.READY,
    )


@transaction.atomic
def delete_order(*, owner: User, order_id: UUID) -> None:
    """
    Delete a service order.

    The customer's order count is derived from the remaining orders, so
    there is nothing else to adjust.
    """
    order = get_order(owner=owner, order_id=order_id, for_update=True)
    order.delete()
    logger.info("Account %s deleted service order %s", owner.id, order_id)


def get_kanban_board(*, owner: User) -> list[dict]:
    """
    Group the account's orders into one column per status, in workflow order.

    Returns:
        list[dict]: Five columns, each with ``status``, ``label`` and
        ``orders`` (newest first).
    """
    columns = {
        status: {'status': status, 'label': label, 'orders': []}
        for status, label in OrderStatus.choices
    }
    for order in get_account_orders(owner=owner):
        columns[order.status]['orders'].append(order)
    return list(columns.values())

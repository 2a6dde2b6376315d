"""Customer management - create, update and delete customers."""

from django.db import transaction
from django.db.models import Count, QuerySet
from uuid import UUID
import logging

from apps.accounts.models import User
from apps.accounts.services import PlanResource, lock_account, check_plan_limit
from apps.orders.models import ServiceOrder
from ..models import Customer, DEFAULT_PHONE
from .exceptions import CustomerNotFoundError

logger = logging.getLogger(__name__)

CUSTOMER_UPDATABLE_FIELDS = ('name', 'phone', 'cpf')


def _attach_unlinked_orders(customer):
    """Link the account's walk-in orders recorded under the customer's name."""
    return ServiceOrder.objects.filter(
        owner_id=customer.owner_id,
        customer__isnull=True,
        customer_name=customer.name,
    ).update(customer=customer)


def get_account_customers(*, owner: User) -> QuerySet:
    """Account's customers annotated with ``order_count``."""
    return (
        Customer.objects
        .filter(owner=owner)
        .annotate(order_count=Count('service_orders', distinct=True))
        .order_by('name')
    )


def get_customer(*, owner: User, customer_id: UUID, for_update: bool = False) -> Customer:
    """
    Raises:
        CustomerNotFoundError: If the customer is missing or owned by another account
    """
    queryset = Customer.objects.filter(owner=owner)
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=customer_id)
    except Customer.DoesNotExist:
        raise CustomerNotFoundError("Cliente não encontrado.")


@transaction.atomic
def create_customer(*, owner: User, name: str, phone: str = '', cpf: str = '') -> Customer:
    """
    Register a customer.

    Locks the account and enforces the free-plan customer cap before
    inserting, so concurrent creates cannot overshoot it. Initials are
    derived from the name and an empty phone falls back to the
    placeholder number. Earlier orders recorded under the same name
    without a customer are linked to the new record.

    Raises:
        PlanLimitExceededError: If a free account already has the maximum customers
    """
    account = lock_account(owner.id)
    check_plan_limit(
        account=account,
        resource=PlanResource.CUSTOMERS,
        current_count=Customer.objects.filter(owner=account).count(),
    )

    customer = Customer.objects.create(
        owner=account,
        name=name.strip(),
        phone=phone or DEFAULT_PHONE,
        cpf=cpf or '',
    )
    attached = _attach_unlinked_orders(customer)
    logger.info(
        "Account %s registered customer %s (%s earlier orders linked)",
        account.id, customer.id, attached
    )
    return customer


@transaction.atomic
def update_customer(*, owner: User, customer_id: UUID, **changes) -> Customer:
    """
    Apply a partial update to a customer.

    A rename is copied to the ``customer_name`` of the customer's orders
    in the same transaction, and unlinked orders already carrying the new
    name are attached.

    Raises:
        CustomerNotFoundError: If the customer doesn't exist in the account
    """
    customer = get_customer(owner=owner, customer_id=customer_id, for_update=True)

    fields = [name for name in CUSTOMER_UPDATABLE_FIELDS if name in changes]
    if not fields:
        return customer

    renamed = 'name' in changes and changes['name'].strip() != customer.name
    for name in fields:
        value = changes[name]
        if name == 'name':
            value = value.strip()
        elif name == 'phone':
            value = value or DEFAULT_PHONE
        setattr(customer, name, value or '')
    customer.save(update_fields=fields + ['updated_at'])

    if renamed:
        updated = ServiceOrder.objects.filter(owner=owner, customer=customer).update(
            customer_name=customer.name
        )
        logger.info("Customer %s renamed; %s orders updated", customer.id, updated)
        attached = _attach_unlinked_orders(customer)
        if attached:
            logger.info("Customer %s linked to %s earlier orders", customer.id, attached)

    return customer


@transaction.atomic
def delete_customer(*, owner: User, customer_id: UUID) -> None:
    """
    Delete a customer.

    Orders keep the customer's name and lose only the link.
    """
    customer = get_customer(owner=owner, customer_id=customer_id, for_update=True)
    customer.delete()
    logger.info("Account %s deleted customer %s", owner.id, customer_id)

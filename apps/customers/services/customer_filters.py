"""
Customer list filters.

Every filter works on the account's customers and their service orders:

    all     every customer
    recent  customers with an order opened in the last 30 days
    active  customers with at least one order not yet Ready
    loyal   customers with three or more orders
    ready   customers with an order waiting for pickup (Ready)

The Portuguese tab labels of the customer screen are accepted as aliases.
Search (name or CPF) is applied before the filter.

:func:`matches_search` and :func:`matches_filter` evaluate one customer
against in-memory orders; :func:`filter_customers` applies the same rules
to a queryset.
"""

from collections.abc import Mapping
from datetime import timedelta

from django.db.models import Count, Q, QuerySet
from django.utils import timezone

from apps.finance.aggregation import order_date
from apps.orders.models import ServiceOrder, OrderStatus
from .exceptions import InvalidCustomerFilterError


class CustomerFilter:
    ALL = 'all'
    RECENT = 'recent'
    ACTIVE = 'active'
    LOYAL = 'loyal'
    READY = 'ready'


FILTER_ALIASES = {
    'Todos': CustomerFilter.ALL,
    'Recentes': CustomerFilter.RECENT,
    'Com OS Ativa': CustomerFilter.ACTIVE,
    'Fidelizados': CustomerFilter.LOYAL,
    'Prontos': CustomerFilter.READY,
}

CUSTOMER_FILTERS = (
    CustomerFilter.ALL,
    CustomerFilter.RECENT,
    CustomerFilter.ACTIVE,
    CustomerFilter.LOYAL,
    CustomerFilter.READY,
)

RECENT_DAYS = 30
LOYAL_MIN_ORDERS = 3


def normalize_filter(name):
    """
    Map a filter key or its Portuguese label to the filter key.

    Raises:
        InvalidCustomerFilterError: If the filter is unknown
    """
    if not name:
        return CustomerFilter.ALL
    key = FILTER_ALIASES.get(name, name)
    if key not in CUSTOMER_FILTERS:
        raise InvalidCustomerFilterError(f"Filtro de clientes inválido: {name}")
    return key


def _status(order):
    if isinstance(order, Mapping):
        return order.get('status')
    return order.status


def matches_search(customer, search):
    """Case-insensitive name match or raw CPF substring match."""
    if not search:
        return True
    name = customer['name'] if isinstance(customer, Mapping) else customer.name
    cpf = (customer.get('cpf') if isinstance(customer, Mapping) else customer.cpf) or ''
    return search.lower() in name.lower() or search in cpf


def matches_filter(orders, filter_name=None, today=None):
    """
    Whether a customer with these orders passes the named filter.

    Args:
        orders: The customer's service orders (instances or mappings).
        filter_name (str, optional): Filter key or Portuguese label.
        today (date, optional): Reference day for the recent filter.
            Defaults to the current local date.

    Raises:
        InvalidCustomerFilterError: If the filter is unknown
    """
    key = normalize_filter(filter_name)
    orders = list(orders)

    if key == CustomerFilter.RECENT:
        since = (today or timezone.localdate()) - timedelta(days=RECENT_DAYS)
        return any(
            created is not None and created >= since
            for created in (order_date(order) for order in orders)
        )
    if key == CustomerFilter.ACTIVE:
        return any(_status(order) != OrderStatus.READY for order in orders)
    if key == CustomerFilter.LOYAL:
        return len(orders) >= LOYAL_MIN_ORDERS
    if key == CustomerFilter.READY:
        return any(_status(order) == OrderStatus.READY for order in orders)
    return True


def _customers_with_orders(**lookups):
    return ServiceOrder.objects.filter(customer__isnull=False, **lookups).values('customer_id')


def search_customers(queryset: QuerySet, search: str) -> QuerySet:
    """Case-insensitive name match or raw CPF substring match."""
    if not search:
        return queryset
    return queryset.filter(Q(name__icontains=search) | Q(cpf__contains=search))


def filter_customers(queryset: QuerySet, filter_name=None, search='', now=None) -> QuerySet:
    """
    Apply search, then the named filter.

    Args:
        queryset: Customers of one account.
        filter_name (str, optional): Filter key or Portuguese label.
        search (str): Text matched against name and CPF.
        now (datetime, optional): Reference time for the recent filter.

    Returns:
        QuerySet: Customers, in name order, each annotated with ``order_count``.

    Raises:
        InvalidCustomerFilterError: If the filter is unknown
    """
    key = normalize_filter(filter_name)
    queryset = search_customers(queryset, search).annotate(
        order_count=Count('service_orders', distinct=True)
    )

    if key == CustomerFilter.RECENT:
        since = (now or timezone.now()) - timedelta(days=RECENT_DAYS)
        queryset = queryset.filter(id__in=_customers_with_orders(created_at__gte=since))
    elif key == CustomerFilter.ACTIVE:
        queryset = queryset.filter(
            id__in=_customers_with_orders().exclude(status=OrderStatus.READY)
        )
    elif key == CustomerFilter.LOYAL:
        queryset = queryset.filter(order_count__gte=LOYAL_MIN_ORDERS)
    elif key == CustomerFilter.READY:
        queryset = queryset.filter(id__in=_customers_with_orders(status=OrderStatus.READY))

    return queryset.order_by('name')

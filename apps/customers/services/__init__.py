"""Services for customers business logic."""

from .exceptions import (
    CustomersServiceError,
    CustomerNotFoundError,
    InvalidCustomerFilterError,
)
from .customer_management import (
    get_account_customers,
    get_customer,
    create_customer,
    update_customer,
    delete_customer,
)
from .customer_filters import (
    CustomerFilter,
    CUSTOMER_FILTERS,
    normalize_filter,
    matches_search,
    matches_filter,
    search_customers,
    filter_customers,
)

__all__ = [
    # Exceptions
    'CustomersServiceError',
    'CustomerNotFoundError',
    'InvalidCustomerFilterError',
    # Customers
    'get_account_customers',
    'get_customer',
    'create_customer',
    'update_customer',
    'delete_customer',
    # Filters
    'CustomerFilter',
    'CUSTOMER_FILTERS',
    'normalize_filter',
    'matches_search',
    'matches_filter',
    'search_customers',
    'filter_customers',
]

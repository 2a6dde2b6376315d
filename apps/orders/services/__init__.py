"""Services for orders business logic."""

from .exceptions import (
    OrdersServiceError,
    OrderNotFoundError,
    CustomerNotFoundError,
    InvalidProgressError,
    TechnicianNotFoundError,
)
from .status_rules import PROGRESS_COMPLETE, validate_progress, resolve_status
from .order_management import (
    get_order,
    get_account_orders,
    create_order,
    update_order,
    complete_order,
    delete_order,
    get_kanban_board,
)
from .technician_management import (
    get_technicians,
    create_technician,
    delete_technician,
)

__all__ = [
    # Exceptions
    'OrdersServiceError',
    'OrderNotFoundError',
    'CustomerNotFoundError',
    'InvalidProgressError',
    'TechnicianNotFoundError',
    # Status rules
    'PROGRESS_COMPLETE',
    'validate_progress',
    'resolve_status',
    # Orders
    'get_order',
    'get_account_orders',
    'create_order',
    'update_order',
    'complete_order',
    'delete_order',
    'get_kanban_board',
    # Technicians
    'get_technicians',
    'create_technician',
    'delete_technician',
]

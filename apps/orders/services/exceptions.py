"""Domain exceptions for orders app."""


class OrdersServiceError(Exception):
    """Base exception for all orders service errors."""
    pass


class OrderNotFoundError(OrdersServiceError):
    """Service order does not exist or belongs to another account."""
    pass


class CustomerNotFoundError(OrdersServiceError):
    """Referenced customer does not exist in this account."""
    pass


class InvalidProgressError(OrdersServiceError):
    """Progress must be between 0 and 100."""
    pass


class TechnicianNotFoundError(OrdersServiceError):
    """Technician does not exist or belongs to another account."""
    pass

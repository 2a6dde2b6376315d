"""Domain exceptions for customers app."""


class CustomersServiceError(Exception):
    """Base exception for all customers service errors."""
    pass


class CustomerNotFoundError(CustomersServiceError):
    """Customer does not exist or belongs to another account."""
    pass


class InvalidCustomerFilterError(CustomersServiceError):
    """Unknown customer list filter."""
    pass

"""Domain exceptions for inventory app."""


class InventoryServiceError(Exception):
    """Base exception for all inventory service errors."""
    pass


class InventoryItemNotFoundError(InventoryServiceError):
    """Item does not exist or belongs to another account."""
    pass

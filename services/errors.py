"""
Exceptions raised by the inventory, recommendation and auth services.
Messages are meant to be shown to the user verbatim.
"""


class InventoryError(Exception):
    """Base class for all domain errors."""


class DuplicateKeyError(InventoryError):
    """Raised when adding a product or user whose id already exists."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} '{key}' already exists")


class NotFoundError(InventoryError, KeyError):
    """Raised when a product, user or location reference is unknown."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} '{key}' not found")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InsufficientStockError(InventoryError):
    """Raised when a mutation would drive a stock quantity below zero."""

    def __init__(self, product_id: str, location_id: str, available: int, requested: int):
        self.product_id = product_id
        self.location_id = location_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for '{product_id}' at '{location_id}': "
            f"requested {requested}, available {available}"
        )


class InvalidArgumentError(InventoryError, ValueError):
    """Raised for arguments outside an operation's domain, e.g. a non-positive transfer quantity."""


class AuthenticationError(InventoryError):
    """Raised when a login attempt fails."""

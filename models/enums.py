"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class OperationType(str, Enum):
    """Kinds of mutations recorded in the inventory history log"""

    ADD_ITEM = "ADD_ITEM"  # Product added to the catalog
    UPDATE_STOCK = "UPDATE_STOCK"  # Stock adjusted at a single location
    TRANSFER = "TRANSFER"  # Stock moved between two locations


class UserRole(str, Enum):
    """Roles a user of the retail system can hold"""

    CUSTOMER = "CUSTOMER"
    STAFF = "STAFF"
    MANAGER = "MANAGER"
    ADMIN = "ADMIN"

    @property
    def rank(self) -> int:
        """Position of the role in the permission ladder (higher grants more)."""
        return _ROLE_RANKS[self]


_ROLE_RANKS = {
    UserRole.CUSTOMER: 0,
    UserRole.STAFF: 1,
    UserRole.MANAGER: 2,
    UserRole.ADMIN: 3,
}

"""
Inventory-related data models.
Includes the InventoryOperation audit record, ConsumptionRecord history entries,
and the derived ReplenishmentRecommendation and PurchasePlan dataclasses.
"""

import uuid
from dataclasses import dataclass
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from .enums import OperationType


class InventoryOperation(BaseModel):
    """Audit record for a single inventory mutation. Never mutated once recorded."""

    model_config = ConfigDict(frozen=True)

    operation_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    operation_type: OperationType
    product_id: str
    quantity: int  # Signed delta
    timestamp: datetime = Field(default_factory=datetime.now)
    note: str = ""
    location_id: str | None = None
    destination_location_id: str | None = None


@dataclass(frozen=True)
class ConsumptionRecord:
    """
    One day's stock movement for a product as reported by a history source.
    Positive quantity_changed means units were consumed.
    """

    date: date
    quantity_changed: int


@dataclass
class ReplenishmentRecommendation:
    """Suggested reorder for a product that is at or below threshold at a location."""

    product_id: str
    name: str
    current_quantity: int
    recommended_quantity: int
    supplier: str


@dataclass
class PurchasePlan:
    """Planned purchase batch for a product projected to need restocking soon."""

    product_id: str
    name: str
    batch_size: int
    restock_date: date

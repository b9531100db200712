"""Collector component for entities that carry an inventory."""

from dataclasses import dataclass, field
from ..core.component import Component
from ..inventory.ledger import InventoryLedger


@dataclass
class CollectorComponent(Component):
    """An entity that can pick up and drop collectables."""

    ledger: InventoryLedger = field(default_factory=InventoryLedger)
    items_collected: int = 0
    items_dropped: int = 0

"""Interaction system for picking items up and dropping them back into the world."""

import logging
from typing import List, Optional, Tuple

from ..core.system import System
from ..components.collectable import CollectableComponent
from ..components.collector import CollectorComponent
from ..components.transform import TransformComponent
from ..factories.collectable_factory import CollectableFactory
from ..inventory.ledger import Stack
from ..models.catalog import CatalogEntry
from ..models.settings import InventorySettings

logger = logging.getLogger(__name__)


class InteractionSystem(System):
    """Moves items between the world and collectors' ledgers."""

    priority = 100

    def __init__(self, factory: CollectableFactory, settings: Optional[InventorySettings] = None):
        super().__init__()
        self.factory = factory
        self.settings = settings or InventorySettings()

    @property
    def catalog(self):
        return self.factory.catalog

    def collect(self, collector_id: int, collectable_id: int) -> Optional[Stack]:
        """
        Pick up a collectable. Called when a collector touches one.

        Args:
            collector_id: Entity ID of the collector
            collectable_id: Entity ID of the collectable in the world

        Returns:
            The collector's stack for the item, or None if nothing was picked up
        """
        collector = self.world.get_component(collector_id, CollectorComponent)
        collectable = self.world.get_component(collectable_id, CollectableComponent)
        if not collector or not collectable:
            return None

        entry = self.catalog.get(collectable.entry_id)
        if entry is None:
            logger.warning(
                "Collectable %d refers to unknown entry %r", collectable_id, collectable.entry_id
            )
            return None

        logger.info(
            "Collected: %s of type %s with value %d",
            entry.display_name, entry.category.display_name, entry.value,
        )
        stack = collector.ledger.add_item(entry, self.settings.pickup_amount)
        collector.items_collected += self.settings.pickup_amount
        self.world.destroy_entity(collectable_id)
        return stack

    def drop_item(self, collector_id: int, entry: CatalogEntry) -> Optional[int]:
        """
        Drop an item from the collector's ledger in front of the collector.

        Args:
            collector_id: Entity ID of the collector
            entry: Item to drop

        Returns:
            Entity ID of the dropped collectable, or None if nothing was dropped
        """
        collector = self.world.get_component(collector_id, CollectorComponent)
        transform = self.world.get_component(collector_id, TransformComponent)
        if not collector or entry not in collector.ledger:
            return None

        amount = min(self.settings.drop_amount, collector.ledger.quantity_of(entry))
        collector.ledger.remove_item(entry, amount)
        collector.items_dropped += amount

        origin = transform or TransformComponent()
        drop_at = origin.offset(self.settings.drop_distance, self.settings.drop_height)
        dropped_id = self.factory.create_collectable(entry, drop_at)
        logger.info("Dropped %s at (%.1f, %.1f, %.1f)", entry.display_name, *drop_at.position)
        return dropped_id

    def drop_active_item(self, collector_id: int) -> Optional[int]:
        """Drop the collector's active item, if it has one."""
        collector = self.world.get_component(collector_id, CollectorComponent)
        if not collector:
            return None

        active = collector.ledger.get_active_stack()
        if active is None:
            return None
        return self.drop_item(collector_id, active.entry)

    def next_item(self, collector_id: int) -> Optional[Stack]:
        """Make the collector's next stack active."""
        collector = self.world.get_component(collector_id, CollectorComponent)
        if not collector:
            return None
        return collector.ledger.cycle_active_stack()

    def collectables(self) -> List[Tuple[int, CollectableComponent, TransformComponent]]:
        """All collectables currently lying in the world."""
        return list(self.world.query(CollectableComponent, TransformComponent))

    def update(self, delta_time: float) -> None:
        """Not used - interactions are event-driven."""
        pass

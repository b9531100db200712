"""Factory for creating collectable and collector entities."""

from typing import Optional

from ..core.world import World
from ..components.collectable import CollectableComponent
from ..components.collector import CollectorComponent
from ..components.transform import TransformComponent
from ..inventory.ledger import InventoryLedger
from ..models.catalog import CatalogEntry, ItemCatalog


class CollectableFactory:
    """Creates world entities for catalog entries and the collectors that pick them up."""

    def __init__(self, world: World, catalog: ItemCatalog):
        self.world = world
        self.catalog = catalog

    def create_collectable(
        self,
        entry: CatalogEntry,
        transform: Optional[TransformComponent] = None,
    ) -> int:
        """
        Place a collectable for ``entry`` in the world.

        Args:
            entry: Catalog entry the pick-up represents
            transform: Where to put it (origin if omitted)

        Returns:
            Entity ID of the collectable
        """
        return self.world.create_entity(
            CollectableComponent(entry_id=entry.id, label=f"Item - {entry.display_name}"),
            transform or TransformComponent(),
        )

    def create_collector(
        self,
        transform: Optional[TransformComponent] = None,
        ledger: Optional[InventoryLedger] = None,
    ) -> int:
        """
        Create an entity that can collect items.

        Args:
            transform: Starting placement (origin if omitted)
            ledger: Existing ledger to carry, e.g. one restored from a save

        Returns:
            Entity ID of the collector
        """
        return self.world.create_entity(
            CollectorComponent(ledger=ledger if ledger is not None else InventoryLedger()),
            transform or TransformComponent(),
        )

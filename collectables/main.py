"""Collectables - inventory ledger demo.

Scatters one of every catalog item in a world, then walks a collector through
a scripted pickup / cycle / drop session and logs what the hotbar shows.
"""

import argparse
import logging
from pathlib import Path

from .core.world import World
from .components.transform import TransformComponent
from .components.collector import CollectorComponent
from .factories.collectable_factory import CollectableFactory
from .models.catalog import ItemCatalog
from .models.settings import InventorySettings
from .systems.interaction_system import InteractionSystem
from .ui.slot_presenter import InventorySlotPresenter

logger = logging.getLogger("collectables")


def run_demo(catalog: ItemCatalog, settings: InventorySettings) -> World:
    """Run the scripted session and return the resulting world."""
    world = World()
    factory = CollectableFactory(world, catalog)
    interactions = InteractionSystem(factory, settings)
    world.register_system(interactions)

    player_id = factory.create_collector(TransformComponent(forward=(1.0, 0.0, 0.0)))
    ledger = world.get_component(player_id, CollectorComponent).ledger
    hotbar = InventorySlotPresenter(ledger, settings)
    hotbar.enable()

    for offset, entry in enumerate(catalog):
        factory.create_collectable(entry, TransformComponent(x=float(offset) * 3.0))

    for collectable_id, _, _ in interactions.collectables():
        interactions.collect(player_id, collectable_id)
    _log_hotbar(hotbar)

    for _ in range(2):
        interactions.next_item(player_id)
    interactions.drop_active_item(player_id)
    interactions.drop_active_item(player_id)
    _log_hotbar(hotbar)

    logger.info(
        "%d item(s) left in the world, inventory worth %d",
        len(interactions.collectables()), ledger.total_value(),
    )
    hotbar.disable()
    return world


def _log_hotbar(hotbar: InventorySlotPresenter) -> None:
    for slot in hotbar.slots:
        marker = "*" if slot.active else " "
        logger.info("%s [%s] %s x%s", marker, slot.rect.topleft, slot.entry.display_name, slot.quantity_text)


def main():
    """Run the demo."""
    parser = argparse.ArgumentParser(description="Collectables inventory demo")
    parser.add_argument("--catalog", type=Path, default=None,
                        help="Catalog JSON file (defaults to the packaged catalog)")
    parser.add_argument("--settings", type=Path, default=None,
                        help="Settings JSON file (defaults to ~/.collectables/settings.json)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = InventorySettings.load(args.settings)
    catalog_path = args.catalog or (Path(settings.catalog_path) if settings.catalog_path else None)
    run_demo(ItemCatalog.load(catalog_path), settings)


if __name__ == "__main__":
    main()

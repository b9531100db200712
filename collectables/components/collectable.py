"""Collectable component for items lying in the world."""

from dataclasses import dataclass
from ..core.component import Component


@dataclass
class CollectableComponent(Component):
    """Marks an entity as a pick-up of one catalog entry."""

    entry_id: str = ""
    label: str = ""  # e.g. "Item - Ruby"

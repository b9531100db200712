"""Catalog of collectable kinds.

Entries are loaded once (usually from ``data/catalog.json``) and shared by
reference. Nothing in the inventory mutates them; stacks are keyed by
``CatalogEntry.id``.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

import pygame

from .enums import ItemCategory

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "catalog.json"

ColorSpec = Union[str, List[int], Tuple[int, ...]]


@dataclass(frozen=True)
class CatalogEntry:
    """Immutable descriptor of one kind of collectable."""

    id: str
    display_name: str
    category: ItemCategory = ItemCategory.MISC
    value: int = 0
    icon: str = ""  # Asset path, resolved by whoever renders it
    color: Tuple[int, int, int] = (255, 255, 255)

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogEntry":
        """
        Build an entry from its JSON form.

        Raises:
            KeyError: if ``id`` is missing
            ValueError: if the category or color cannot be parsed
        """
        entry_id = str(data["id"])
        category = ItemCategory.from_name(data.get("category", "misc"))
        color = data.get("color")
        return cls(
            id=entry_id,
            display_name=data.get("name", entry_id),
            category=category,
            value=int(data.get("value", 0)),
            icon=data.get("icon", ""),
            color=parse_color(color) if color is not None else category.color,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.display_name,
            "category": self.category.name.lower(),
            "value": self.value,
            "icon": self.icon,
            "color": list(self.color),
        }


def parse_color(spec: ColorSpec) -> Tuple[int, int, int]:
    """
    Parse a color given as ``"#rrggbb"``, a color name, or ``[r, g, b]``.

    Raises:
        ValueError: if pygame can't make sense of it
    """
    if isinstance(spec, (list, tuple)):
        color = pygame.Color(*spec)
    else:
        color = pygame.Color(spec)
    return (color.r, color.g, color.b)


class ItemCatalog:
    """Lookup of catalog entries by id."""

    def __init__(self, entries: Optional[List[CatalogEntry]] = None):
        self._entries: Dict[str, CatalogEntry] = {}
        for entry in entries or []:
            self.add(entry)

    def add(self, entry: CatalogEntry) -> None:
        """Register an entry. Raises ValueError on a duplicate id."""
        if entry.id in self._entries:
            raise ValueError(f"Duplicate catalog entry id: {entry.id!r}")
        self._entries[entry.id] = entry

    def get(self, entry_id: str) -> Optional[CatalogEntry]:
        return self._entries.get(entry_id)

    def by_category(self, category: ItemCategory) -> List[CatalogEntry]:
        return [e for e in self._entries.values() if e.category == category]

    def __getitem__(self, entry_id: str) -> CatalogEntry:
        return self._entries[entry_id]

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_dict(cls, data: dict) -> "ItemCatalog":
        """Build a catalog from ``{"entries": [...]}``, skipping malformed entries."""
        catalog = cls()
        entries = data.get("entries", []) if isinstance(data, dict) else None
        if not isinstance(entries, list):
            logger.warning("Catalog data has no \"entries\" list, starting empty")
            return catalog

        for raw in entries:
            try:
                catalog.add(CatalogEntry.from_dict(raw))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping catalog entry %r: %s", raw, e)
        return catalog

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ItemCatalog":
        """Load from a JSON file, or return an empty catalog if it can't be read."""
        if path is None:
            path = DEFAULT_CATALOG_PATH
        path = Path(path)

        if not path.exists():
            logger.warning("Catalog file %s not found, starting empty", path)
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read catalog %s: %s", path, e)
            return cls()

        catalog = cls.from_dict(data)
        logger.info("Loaded %d catalog entries from %s", len(catalog), path)
        return catalog

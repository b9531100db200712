"""User-tunable inventory settings, saved to disk as JSON."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".collectables" / "settings.json"


@dataclass
class InventorySettings:
    """Settings shared by the interaction system and the slot presenter."""

    # Quantities moved per pickup / drop
    pickup_amount: int = 1
    drop_amount: int = 1

    # Dropped items land this far in front of and above the collector
    drop_distance: float = 2.0
    drop_height: float = 1.0

    # Slot layout (pixels)
    slot_size: int = 64
    slot_padding: int = 8
    hotbar_origin: Tuple[int, int] = (16, 16)
    slots_per_row: int = 10

    # None means the packaged catalog
    catalog_path: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "pickup_amount": self.pickup_amount,
            "drop_amount": self.drop_amount,
            "drop_distance": self.drop_distance,
            "drop_height": self.drop_height,
            "slot_size": self.slot_size,
            "slot_padding": self.slot_padding,
            "hotbar_origin": list(self.hotbar_origin),
            "slots_per_row": self.slots_per_row,
            "catalog_path": self.catalog_path,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InventorySettings":
        """Create from dictionary, falling back to defaults for missing keys."""
        defaults = cls()
        origin = data.get("hotbar_origin", defaults.hotbar_origin)
        return cls(
            pickup_amount=max(1, int(data.get("pickup_amount", defaults.pickup_amount))),
            drop_amount=max(1, int(data.get("drop_amount", defaults.drop_amount))),
            drop_distance=float(data.get("drop_distance", defaults.drop_distance)),
            drop_height=float(data.get("drop_height", defaults.drop_height)),
            slot_size=int(data.get("slot_size", defaults.slot_size)),
            slot_padding=int(data.get("slot_padding", defaults.slot_padding)),
            hotbar_origin=(int(origin[0]), int(origin[1])),
            slots_per_row=max(1, int(data.get("slots_per_row", defaults.slots_per_row))),
            catalog_path=data.get("catalog_path", defaults.catalog_path),
        )

    def save(self, path: Optional[Path] = None) -> None:
        """Save to disk."""
        if path is None:
            path = DEFAULT_SETTINGS_PATH

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "InventorySettings":
        """Load from disk, or return defaults if missing or unreadable."""
        if path is None:
            path = DEFAULT_SETTINGS_PATH

        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                return cls.from_dict(data)
            except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError, IndexError) as e:
                logger.warning("Ignoring unreadable settings file %s: %s", path, e)

        return cls()

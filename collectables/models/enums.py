"""Collectable enumerations."""

from enum import Enum, auto


class ItemCategory(Enum):
    """Kinds of collectables a catalog entry can describe."""
    GEM = auto()
    COIN = auto()
    WEAPON = auto()
    POTION = auto()
    KEY = auto()
    MISC = auto()

    @property
    def color(self) -> tuple:
        """Fallback RGB color for entries that don't define their own."""
        colors = {
            ItemCategory.GEM: (64, 224, 208),      # Turquoise
            ItemCategory.COIN: (255, 215, 0),      # Gold
            ItemCategory.WEAPON: (192, 192, 192),  # Steel
            ItemCategory.POTION: (220, 20, 60),    # Crimson
            ItemCategory.KEY: (184, 115, 51),      # Brass
            ItemCategory.MISC: (255, 255, 255),
        }
        return colors.get(self, (255, 255, 255))

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "ItemCategory":
        """Look up a category by case-insensitive name. Raises ValueError if unknown."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown item category: {name!r}") from None

from .enums import ItemCategory
from .catalog import CatalogEntry, ItemCatalog
from .settings import InventorySettings

__all__ = ['ItemCategory', 'CatalogEntry', 'ItemCatalog', 'InventorySettings']

"""Shared fixtures for the collectables tests."""

import pytest

from collectables.inventory import InventoryLedger, LedgerEvent
from collectables.models import CatalogEntry, ItemCatalog, ItemCategory


class EventRecorder:
    """Subscribes to every ledger event and records (event, entry id, quantity)."""

    def __init__(self, ledger: InventoryLedger):
        self.events = []
        for event in LedgerEvent:
            ledger.subscribe(event, self, self._make_handler(event))

    def _make_handler(self, event):
        def handler(stack):
            self.events.append(
                (event, stack.entry_id if stack else None, stack.quantity if stack else None)
            )
        return handler

    def of(self, event):
        return [e for e in self.events if e[0] == event]

    def clear(self):
        self.events.clear()


@pytest.fixture
def gem():
    return CatalogEntry(id="gem", display_name="Gem", category=ItemCategory.GEM, value=50)


@pytest.fixture
def sword():
    return CatalogEntry(id="sword", display_name="Sword", category=ItemCategory.WEAPON, value=200)


@pytest.fixture
def potion():
    return CatalogEntry(id="potion", display_name="Potion", category=ItemCategory.POTION, value=25)


@pytest.fixture
def catalog(gem, sword, potion):
    return ItemCatalog([gem, sword, potion])


@pytest.fixture
def ledger():
    return InventoryLedger()


@pytest.fixture
def recorder(ledger):
    return EventRecorder(ledger)

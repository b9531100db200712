"""Tests for the hotbar slot presenter."""

import pytest

from collectables.inventory import LedgerEvent
from collectables.models import InventorySettings
from collectables.ui import InventorySlotPresenter


@pytest.fixture
def settings():
    return InventorySettings(slot_size=10, slot_padding=2, hotbar_origin=(0, 0), slots_per_row=2)


@pytest.fixture
def presenter(ledger, settings):
    hotbar = InventorySlotPresenter(ledger, settings)
    hotbar.enable()
    return hotbar


def view(presenter):
    return [(s.entry.id, s.quantity, s.active) for s in presenter.slots]


def test_first_pickup_creates_active_slot(presenter, ledger, gem):
    ledger.add_item(gem)
    assert view(presenter) == [("gem", 1, True)]


def test_quantities_follow_ledger(presenter, ledger, gem, sword):
    ledger.add_item(gem)
    ledger.add_item(gem, 4)
    ledger.add_item(sword)
    ledger.remove_item(gem, 2)

    assert view(presenter) == [("gem", 3, True), ("sword", 1, False)]
    assert presenter.slots[0].quantity_text == "3"


def test_active_highlight_moves(presenter, ledger, gem, sword):
    ledger.add_item(gem)
    ledger.add_item(sword)
    ledger.cycle_active_stack()

    assert view(presenter) == [("gem", 1, False), ("sword", 1, True)]
    assert presenter.active_slot.entry.id == "sword"


def test_removed_stack_drops_slot_and_relayouts(presenter, ledger, gem, sword, potion):
    for entry in (gem, sword, potion):
        ledger.add_item(entry)
    ledger.set_active_stack(1)

    ledger.remove_item(sword)

    assert view(presenter) == [("gem", 1, False), ("potion", 1, True)]
    assert presenter.slots[1].rect.topleft == (12, 0)


def test_emptying_ledger_clears_slots(presenter, ledger, gem):
    ledger.add_item(gem)
    ledger.remove_item(gem)

    assert presenter.slots == []
    assert presenter.active_slot is None

    ledger.add_item(gem)
    assert view(presenter) == [("gem", 1, True)]


def test_slot_layout_wraps_rows(presenter):
    assert presenter.slot_rect(0).topleft == (0, 0)
    assert presenter.slot_rect(1).topleft == (12, 0)
    assert presenter.slot_rect(2).topleft == (0, 12)
    assert presenter.slot_rect(2).size == (10, 10)


def test_select_slot_at_point(presenter, ledger, gem, sword):
    ledger.add_item(gem)
    ledger.add_item(sword)

    assert presenter.slot_at((15, 5)) == 1
    assert presenter.select_slot_at((15, 5)) is True
    assert ledger.active_index == 1
    assert presenter.active_slot.entry.id == "sword"

    assert presenter.slot_at((11, 5)) is None
    assert presenter.select_slot_at((500, 500)) is False
    assert ledger.active_index == 1


def test_enable_syncs_existing_state(ledger, settings, gem, sword):
    ledger.add_item(gem, 2)
    ledger.add_item(sword)
    ledger.set_active_stack(1)

    hotbar = InventorySlotPresenter(ledger, settings)
    hotbar.enable()

    assert view(hotbar) == [("gem", 2, False), ("sword", 1, True)]


def test_disable_stops_updates(presenter, ledger, gem):
    presenter.disable()
    ledger.add_item(gem)

    assert presenter.slots == []
    for event in LedgerEvent:
        assert ledger.events.subscriber_count(event) == 0


def test_enable_is_idempotent(presenter, ledger, gem):
    presenter.enable()
    ledger.add_item(gem)

    assert ledger.events.subscriber_count(LedgerEvent.ITEM_ADDED) == 1
    assert view(presenter) == [("gem", 1, True)]


def test_slot_exposes_entry_display_data(presenter, ledger, catalog):
    ledger.add_item(catalog["sword"])
    slot = presenter.slots[0]

    assert slot.icon == catalog["sword"].icon
    assert slot.color == catalog["sword"].color

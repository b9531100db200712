"""Tests for the ledger's notification channel."""

import pytest

from collectables.inventory import LedgerEvent, NotificationChannel
from collectables.ui import InventorySlotPresenter


def test_delivery_in_subscription_order():
    channel = NotificationChannel()
    calls = []
    channel.subscribe(LedgerEvent.ITEM_ADDED, "ui", lambda p: calls.append(("ui", p)))
    channel.subscribe(LedgerEvent.ITEM_ADDED, "drop", lambda p: calls.append(("drop", p)))

    channel.emit(LedgerEvent.ITEM_ADDED, 42)

    assert calls == [("ui", 42), ("drop", 42)]


def test_events_are_independent():
    channel = NotificationChannel()
    calls = []
    channel.subscribe(LedgerEvent.ITEM_REMOVED, "ui", calls.append)

    channel.emit(LedgerEvent.ITEM_ADDED, "added")
    channel.emit(LedgerEvent.ACTIVE_CHANGED, "active")

    assert calls == []


def test_resubscribe_replaces_callback_in_place():
    channel = NotificationChannel()
    calls = []
    channel.subscribe(LedgerEvent.ITEM_ADDED, "a", lambda p: calls.append("a1"))
    channel.subscribe(LedgerEvent.ITEM_ADDED, "b", lambda p: calls.append("b"))
    channel.subscribe(LedgerEvent.ITEM_ADDED, "a", lambda p: calls.append("a2"))

    channel.emit(LedgerEvent.ITEM_ADDED, None)

    assert calls == ["a2", "b"]
    assert channel.subscriber_count(LedgerEvent.ITEM_ADDED) == 2


def test_unsubscribe_all():
    channel = NotificationChannel()
    for event in LedgerEvent:
        channel.subscribe(event, "ui", lambda p: None)
    channel.subscribe(LedgerEvent.ITEM_ADDED, "other", lambda p: None)

    assert channel.unsubscribe_all("ui") == 3
    assert channel.unsubscribe_all("ui") == 0
    assert channel.subscriber_count(LedgerEvent.ITEM_ADDED) == 1
    assert channel.subscriber_count(LedgerEvent.ACTIVE_CHANGED) == 0


def test_callback_errors_propagate():
    channel = NotificationChannel()

    def boom(payload):
        raise RuntimeError("observer failed")

    channel.subscribe(LedgerEvent.ITEM_ADDED, "bad", boom)
    with pytest.raises(RuntimeError):
        channel.emit(LedgerEvent.ITEM_ADDED, None)


def test_observer_can_unsubscribe_itself_during_delivery(ledger, gem):
    calls = []

    class OneShot:
        def on_added(self, stack):
            calls.append("once")
            ledger.unsubscribe(LedgerEvent.ITEM_ADDED, self)

    listener = OneShot()
    ledger.subscribe(LedgerEvent.ITEM_ADDED, listener, listener.on_added)
    ledger.subscribe(LedgerEvent.ITEM_ADDED, "ui", lambda stack: calls.append("ui"))

    ledger.add_item(gem)
    ledger.add_item(gem)

    assert calls == ["once", "ui", "ui"]
    assert ledger.events.subscriber_count(LedgerEvent.ITEM_ADDED) == 1


def test_presenter_can_be_disabled_from_a_callback(ledger, gem):
    hotbar = InventorySlotPresenter(ledger)
    hotbar.enable()
    ledger.subscribe(LedgerEvent.ACTIVE_CHANGED, "closer", lambda stack: hotbar.disable())

    ledger.add_item(gem)

    assert ledger.quantity_of(gem) == 1
    assert not hotbar.enabled

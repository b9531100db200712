"""Hotbar slot view model driven by ledger notifications."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from ..inventory.events import LedgerEvent
from ..inventory.ledger import InventoryLedger, Stack
from ..models.catalog import CatalogEntry
from ..models.settings import InventorySettings

logger = logging.getLogger(__name__)


@dataclass
class SlotView:
    """What one inventory slot shows, with its rect for hover detection."""

    entry: CatalogEntry
    quantity: int
    rect: pygame.Rect
    active: bool = False

    @property
    def quantity_text(self) -> str:
        return str(self.quantity)

    @property
    def icon(self) -> str:
        return self.entry.icon

    @property
    def color(self) -> Tuple[int, int, int]:
        return self.entry.color


class InventorySlotPresenter:
    """
    Keeps one SlotView per ledger stack, in ledger order.

    The presenter only listens while enabled; whoever owns it should call
    enable() when the inventory UI is shown and disable() when it goes away.
    """

    def __init__(self, ledger: InventoryLedger, settings: Optional[InventorySettings] = None):
        self.ledger = ledger
        self.settings = settings or InventorySettings()
        self.slots: List[SlotView] = []
        self.enabled = False
        self._active_entry_id: Optional[str] = None

    def enable(self) -> None:
        """Start listening to the ledger and catch up with its current state."""
        if self.enabled:
            return
        self.ledger.subscribe(LedgerEvent.ITEM_ADDED, self, self._on_item_added)
        self.ledger.subscribe(LedgerEvent.ITEM_REMOVED, self, self._on_item_removed)
        self.ledger.subscribe(LedgerEvent.ACTIVE_CHANGED, self, self._on_active_changed)
        self.enabled = True
        self.sync()

    def disable(self) -> None:
        """Stop listening to the ledger."""
        if not self.enabled:
            return
        self.ledger.events.unsubscribe_all(self)
        self.enabled = False

    def sync(self) -> None:
        """Rebuild every slot from the ledger."""
        active = self.ledger.get_active_stack()
        self._active_entry_id = active.entry_id if active else None
        self.slots = [
            SlotView(
                entry=stack.entry,
                quantity=stack.quantity,
                rect=self.slot_rect(index),
                active=stack.entry_id == self._active_entry_id,
            )
            for index, stack in enumerate(self.ledger)
        ]

    # --- Layout ---

    def slot_rect(self, index: int) -> pygame.Rect:
        """Screen rect of the slot at ``index``."""
        size = self.settings.slot_size
        step = size + self.settings.slot_padding
        row, col = divmod(index, self.settings.slots_per_row)
        origin_x, origin_y = self.settings.hotbar_origin
        return pygame.Rect(origin_x + col * step, origin_y + row * step, size, size)

    def slot_at(self, point: Tuple[int, int]) -> Optional[int]:
        """Index of the slot under ``point``, or None."""
        for index, slot in enumerate(self.slots):
            if slot.rect.collidepoint(point):
                return index
        return None

    def select_slot_at(self, point: Tuple[int, int]) -> bool:
        """Make the stack under ``point`` active. Returns True if one was selected."""
        index = self.slot_at(point)
        if index is None:
            return False
        return self.ledger.set_active_stack(index)

    @property
    def active_slot(self) -> Optional[SlotView]:
        for slot in self.slots:
            if slot.active:
                return slot
        return None

    # --- Ledger notifications ---

    def _find_slot(self, entry_id: str) -> Optional[int]:
        for index, slot in enumerate(self.slots):
            if slot.entry.id == entry_id:
                return index
        return None

    def _relayout(self) -> None:
        for index, slot in enumerate(self.slots):
            slot.rect = self.slot_rect(index)

    def _on_item_added(self, stack: Stack) -> None:
        logger.debug("Item Added: %s, Quantity: %d", stack.entry.display_name, stack.quantity)
        index = self._find_slot(stack.entry_id)
        if index is not None:
            self.slots[index].quantity = stack.quantity
            return

        self.slots.append(SlotView(
            entry=stack.entry,
            quantity=stack.quantity,
            rect=self.slot_rect(len(self.slots)),
            active=stack.entry_id == self._active_entry_id,
        ))

    def _on_item_removed(self, stack: Stack) -> None:
        logger.debug("Item Removed: %s, Quantity: %d", stack.entry.display_name, stack.quantity)
        index = self._find_slot(stack.entry_id)
        if index is None:
            return

        if stack.quantity > 0:
            self.slots[index].quantity = stack.quantity
        else:
            del self.slots[index]
            self._relayout()
            if not self.slots:
                self._active_entry_id = None

    def _on_active_changed(self, stack: Optional[Stack]) -> None:
        self._active_entry_id = stack.entry_id if stack else None
        logger.debug(
            "Active Item Changed: %s", stack.entry.display_name if stack else "none"
        )
        for slot in self.slots:
            slot.active = slot.entry.id == self._active_entry_id

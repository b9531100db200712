"""Inventory ledger: owned item stacks plus the active-stack cursor.

The ledger keeps an ordered list of stacks, one per catalog entry id, and an
index pointing at the active stack (-1 when the ledger is empty). Every
successful mutation is announced through the ledger's NotificationChannel.

The ledger is single-threaded and synchronous. Notifications are delivered
in-line before the mutating call returns, so an observer must not call back
into add_item/remove_item/set_active_stack/cycle_active_stack while handling
one; doing so is undefined. Callers sharing a ledger across input sources are
responsible for serializing access.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union

from ..models.catalog import CatalogEntry, ItemCatalog
from .events import LedgerEvent, NotificationChannel

logger = logging.getLogger(__name__)

NO_ACTIVE = -1
NOT_FOUND = -1


class InvalidAmountError(ValueError):
    """Raised when a quantity to add or remove is not a positive integer."""


@dataclass
class Stack:
    """A quantity of one kind of collectable."""

    entry: CatalogEntry
    quantity: int = 1

    @property
    def entry_id(self) -> str:
        return self.entry.id

    @property
    def total_value(self) -> int:
        return self.entry.value * self.quantity

    def __str__(self) -> str:
        return f"{self.entry.display_name} x{self.quantity}"


def _check_amount(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 1:
        raise InvalidAmountError(f"Amount must be a positive integer, got {amount!r}")


class InventoryLedger:
    """Ordered item stacks with an active cursor and change notifications."""

    def __init__(self):
        self._stacks: List[Stack] = []
        self._active_index: int = NO_ACTIVE
        self.events = NotificationChannel()

    # --- Queries ---

    @property
    def stacks(self) -> Tuple[Stack, ...]:
        """Snapshot of the stacks in slot order."""
        return tuple(self._stacks)

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def is_empty(self) -> bool:
        return not self._stacks

    def __len__(self) -> int:
        return len(self._stacks)

    def __iter__(self) -> Iterator[Stack]:
        return iter(tuple(self._stacks))

    def __contains__(self, item: Union[CatalogEntry, str]) -> bool:
        return self.index_of(item) != NOT_FOUND

    def index_of(self, item: Union[CatalogEntry, str]) -> int:
        """Slot index of the stack for ``item`` (an entry or entry id), or -1."""
        entry_id = item.id if isinstance(item, CatalogEntry) else item
        for index, stack in enumerate(self._stacks):
            if stack.entry_id == entry_id:
                return index
        return NOT_FOUND

    def quantity_of(self, item: Union[CatalogEntry, str]) -> int:
        index = self.index_of(item)
        return self._stacks[index].quantity if index != NOT_FOUND else 0

    def total_value(self) -> int:
        return sum(stack.total_value for stack in self._stacks)

    def get_active_stack(self) -> Optional[Stack]:
        """Return the active stack, or None if there isn't one."""
        if 0 <= self._active_index < len(self._stacks):
            return self._stacks[self._active_index]
        return None

    # --- Mutations ---

    def add_item(self, entry: CatalogEntry, amount: int = 1) -> Stack:
        """
        Add ``amount`` of ``entry``, stacking onto an existing stack if present.

        The first stack added to an empty ledger becomes active.

        Returns:
            The stack holding ``entry`` after the add

        Raises:
            InvalidAmountError: if amount is not a positive integer
        """
        _check_amount(amount)

        was_empty = self._active_index == NO_ACTIVE
        index = self.index_of(entry)
        if index != NOT_FOUND:
            stack = self._stacks[index]
            stack.quantity += amount
        else:
            stack = Stack(entry=entry, quantity=amount)
            self._stacks.append(stack)
        logger.debug("Added %d x %s (now %d)", amount, entry.id, stack.quantity)

        if was_empty:
            self.set_active_stack(0)

        self.events.emit(LedgerEvent.ITEM_ADDED, stack)
        return stack

    def collect(self, entry: CatalogEntry) -> Stack:
        """Add a single ``entry``."""
        return self.add_item(entry, 1)

    def remove_item(self, entry: CatalogEntry, amount: int = 1) -> Optional[Stack]:
        """
        Remove ``amount`` of ``entry``.

        A stack that runs out is taken out of the ledger and later stacks
        shift down one slot. The cursor stays on the same slot index when that
        index still exists, otherwise it moves to the new last slot.

        Returns:
            The affected stack in its final state (quantity 0 if it was
            removed), or None if the ledger holds no ``entry``

        Raises:
            InvalidAmountError: if amount is not a positive integer
        """
        _check_amount(amount)

        index = self.index_of(entry)
        if index == NOT_FOUND:
            return None

        stack = self._stacks[index]
        stack.quantity -= amount

        if stack.quantity <= 0:
            stack.quantity = 0
            del self._stacks[index]
            logger.debug("Removed stack %s from slot %d", entry.id, index)
            self._reconcile_cursor()
        else:
            logger.debug("Removed %d x %s (now %d)", amount, entry.id, stack.quantity)

        self.events.emit(LedgerEvent.ITEM_REMOVED, stack)
        return stack

    def _reconcile_cursor(self) -> None:
        """Re-point the cursor after a stack has been taken out."""
        if not self._stacks:
            self._active_index = NO_ACTIVE
            return

        if self._active_index >= len(self._stacks):
            self.set_active_stack(len(self._stacks) - 1)
        else:
            # Same index, but a different stack may occupy it now
            self.set_active_stack(self._active_index)

    def set_active_stack(self, index: int) -> bool:
        """
        Make the stack at ``index`` active.

        Returns:
            True if the cursor moved; False (and nothing emitted) if the
            index is out of range
        """
        if not 0 <= index < len(self._stacks):
            return False

        self._active_index = index
        stack = self._stacks[index]
        logger.debug("Active stack is now slot %d (%s)", index, stack.entry_id)
        self.events.emit(LedgerEvent.ACTIVE_CHANGED, stack)
        return True

    def cycle_active_stack(self) -> Optional[Stack]:
        """Advance the cursor to the next stack, wrapping after the last one."""
        if not self._stacks:
            self._active_index = NO_ACTIVE
            return None

        self.set_active_stack((self._active_index + 1) % len(self._stacks))
        return self.get_active_stack()

    # --- Observers ---

    def subscribe(self, event: LedgerEvent, subscriber, callback: Callable) -> None:
        self.events.subscribe(event, subscriber, callback)

    def unsubscribe(self, event: LedgerEvent, subscriber) -> bool:
        return self.events.unsubscribe(event, subscriber)

    # --- Persistence ---

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "stacks": [
                {"id": stack.entry_id, "quantity": stack.quantity}
                for stack in self._stacks
            ],
            "active_index": self._active_index,
        }

    @classmethod
    def from_dict(cls, data: dict, catalog: ItemCatalog) -> "InventoryLedger":
        """
        Rebuild a ledger from to_dict() output without emitting notifications.

        Stacks whose entry is no longer in the catalog, or whose quantity
        isn't positive, are dropped.
        """
        ledger = cls()
        for raw in data.get("stacks", []):
            entry = catalog.get(raw.get("id", ""))
            quantity = raw.get("quantity", 0)
            if entry is None:
                logger.warning("Dropping saved stack for unknown entry %r", raw.get("id"))
                continue
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                continue

            index = ledger.index_of(entry)
            if index != NOT_FOUND:
                ledger._stacks[index].quantity += quantity
            else:
                ledger._stacks.append(Stack(entry=entry, quantity=quantity))

        active = data.get("active_index", NO_ACTIVE)
        if ledger._stacks:
            valid = isinstance(active, int) and 0 <= active < len(ledger._stacks)
            ledger._active_index = active if valid else 0
        return ledger

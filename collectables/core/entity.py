"""Entity ID bookkeeping for the world."""

import itertools
from typing import Iterator, Set


class EntityManager:
    """Hands out entity IDs and tracks which ones are still in the world."""

    def __init__(self):
        self._next_id = itertools.count(1)
        self._alive: Set[int] = set()

    def create(self) -> int:
        """Allocate a fresh entity ID."""
        entity_id = next(self._next_id)
        self._alive.add(entity_id)
        return entity_id

    def destroy(self, entity_id: int) -> bool:
        """Forget an entity. Returns True if it was alive."""
        if entity_id in self._alive:
            self._alive.remove(entity_id)
            return True
        return False

    def is_alive(self, entity_id: int) -> bool:
        return entity_id in self._alive

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._alive))

    def __len__(self) -> int:
        return len(self._alive)

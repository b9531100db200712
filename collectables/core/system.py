"""Base class for logic that runs against a world."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .world import World


class System(ABC):
    """
    Logic attached to a single world.

    Systems with a lower priority tick first. A disabled system is skipped by
    World.update() but its methods can still be called directly.
    """

    priority: int = 0

    def __init__(self):
        self.world: Optional['World'] = None
        self.enabled = True

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the system by ``delta_time`` seconds."""
        pass

"""Transform component for world placement."""

from dataclasses import dataclass
from typing import Tuple
from ..core.component import Component


@dataclass
class TransformComponent(Component):
    """Position and facing of an entity in the world. Y is up."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    forward: Tuple[float, float, float] = (0.0, 0.0, 1.0)

    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def offset(self, distance: float, height: float) -> "TransformComponent":
        """
        Get a transform ``distance`` units ahead of this one and ``height`` above it.

        The new transform faces the same way.
        """
        fx, fy, fz = self.forward
        return TransformComponent(
            x=self.x + fx * distance,
            y=self.y + height + fy * distance,
            z=self.z + fz * distance,
            forward=self.forward,
        )

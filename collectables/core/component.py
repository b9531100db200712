"""Base component class for the world's entity component store."""

from dataclasses import dataclass
from typing import TypeVar


@dataclass
class Component:
    """
    Base class for all components.
    Components hold the data a world entity carries; systems act on them.
    """
    pass


T = TypeVar('T', bound=Component)

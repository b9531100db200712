"""Minimal entity component store that collectables and collectors live in."""

from .component import Component
from .entity import EntityManager
from .system import System
from .world import World

__all__ = ['Component', 'EntityManager', 'System', 'World']

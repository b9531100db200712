from .collectable_factory import CollectableFactory

__all__ = ['CollectableFactory']

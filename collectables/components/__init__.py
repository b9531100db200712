from .transform import TransformComponent
from .collectable import CollectableComponent
from .collector import CollectorComponent

__all__ = [
    'TransformComponent',
    'CollectableComponent',
    'CollectorComponent',
]

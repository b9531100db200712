from .interaction_system import InteractionSystem

__all__ = ['InteractionSystem']

"""World container holding entities, their components and the systems acting on them."""

from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Tuple, Type

from .entity import EntityManager
from .component import Component, T
from .system import System


class World:
    """
    Container for every entity in a scene.

    Collectables lying on the ground and the collectors picking them up are
    both entities here; the inventory ledger itself lives on a component.
    """

    def __init__(self):
        self.entities = EntityManager()
        self._components: Dict[Type[Component], Dict[int, Component]] = defaultdict(dict)
        self._systems: List[System] = []

    def create_entity(self, *components: Component) -> int:
        """Create a new entity, optionally attaching components, and return its ID."""
        entity_id = self.entities.create()
        for component in components:
            self.add_component(entity_id, component)
        return entity_id

    def destroy_entity(self, entity_id: int) -> bool:
        """Destroy an entity and drop all of its components."""
        for store in self._components.values():
            store.pop(entity_id, None)
        return self.entities.destroy(entity_id)

    def add_component(self, entity_id: int, component: Component) -> None:
        """Attach a component, replacing any previous one of the same type."""
        self._components[type(component)][entity_id] = component

    def remove_component(self, entity_id: int, component_type: Type[T]) -> Optional[T]:
        """Detach a component from an entity and return it."""
        return self._components[component_type].pop(entity_id, None)

    def get_component(self, entity_id: int, component_type: Type[T]) -> Optional[T]:
        return self._components[component_type].get(entity_id)

    def has_component(self, entity_id: int, component_type: Type[Component]) -> bool:
        return entity_id in self._components[component_type]

    def query(self, *component_types: Type[Component]) -> Iterator[Tuple]:
        """
        Iterate entities that have ALL of the given component types.

        Yields tuples of (entity_id, component1, component2, ...) in entity ID order.
        """
        if not component_types:
            return

        candidates = set(self._components[component_types[0]])
        for comp_type in component_types[1:]:
            candidates &= set(self._components[comp_type])

        for entity_id in sorted(candidates):
            if self.entities.is_alive(entity_id):
                yield (entity_id, *(
                    self._components[comp_type][entity_id]
                    for comp_type in component_types
                ))

    def query_single(self, *component_types: Type[Component]) -> Optional[Tuple]:
        """Return the first match of query(), or None."""
        for result in self.query(*component_types):
            return result
        return None

    def register_system(self, system: System) -> None:
        """Attach a system to this world, keeping systems ordered by priority."""
        system.world = self
        self._systems.append(system)
        self._systems.sort(key=lambda s: s.priority)

    def get_system(self, system_type: Type[System]) -> Optional[System]:
        for system in self._systems:
            if isinstance(system, system_type):
                return system
        return None

    def update(self, delta_time: float = 0.0) -> None:
        """Tick every enabled system."""
        for system in self._systems:
            if system.enabled:
                system.update(delta_time)

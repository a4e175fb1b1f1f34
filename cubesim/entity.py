"""Game objects: containers that run the life cycle of their components."""

from __future__ import annotations

from typing import Any, TypeVar

from .component import Component
from .messaging import MessageManager
from .transform import Transform

C = TypeVar("C", bound=Component)

ROOT_ID = 1
FIRST_COMPONENT_ID = 2


class GameObject:
    """An object in a scene, owning a root transform and other components.

    Components created during a frame are initialized at the start of the
    next one; components removed during a frame are destroyed at its end.
    The root transform (id 1) lives as long as the object and is not part
    of the removable components.
    """

    def __init__(self, owner: Any, object_id: int, name: str = "object") -> None:
        self.id = object_id
        self.name = name
        self.owner = owner

        self._messages = MessageManager()
        self._next_component_id = FIRST_COMPONENT_ID
        self._components: list[Component] = []
        self._pending: list[Component] = []
        self._updating: list[Component] = []
        self._doomed: list[Component] = []

        self.root = Transform()
        self.root.game_object = self
        self.root.id = ROOT_ID
        self.root.make_connectors(self._messages)
        self.root.initialize()

    @property
    def scene(self) -> Any:
        return self.owner.scene

    @property
    def components(self) -> tuple[Component, ...]:
        """Owned components in creation order, root excluded."""
        return tuple(self._components)

    # Frame processing ----------------------------------------------------

    def process_frame(self) -> None:
        self.initialize_components()
        self.update_components()
        self.destroy_components()

    def initialize_components(self) -> None:
        """Initialize components created since the last call."""
        pending, self._pending = self._pending, []
        for component in pending:
            component.initialize()

    def update_components(self) -> None:
        """Update registered components, most recently registered first."""
        for component in reversed(list(self._updating)):
            component.update()

    def destroy_components(self) -> None:
        """Destroy components marked for removal and drop their connections."""
        doomed, self._doomed = self._doomed, []
        for component in doomed:
            self._messages.remove_connections(component)
            component.destroy()
            self._components.remove(component)

    # Update registration -------------------------------------------------

    def register_update_call(self, component: Component) -> None:
        self._check_owned(component)
        if component not in self._updating:
            self._updating.append(component)

    def unregister_update_call(self, component: Component) -> None:
        self._check_owned(component)
        if component in self._updating:
            self._updating.remove(component)

    # Components ----------------------------------------------------------

    def create_component(self, component: C) -> C:
        """Adopt a new component; it is initialized at the next frame."""
        if component.game_object is not None:
            raise ValueError("component already belongs to an object")
        component.game_object = self
        component.id = self._next_component_id
        self._next_component_id += 1
        component.make_connectors(self._messages)
        self._components.append(component)
        self._pending.append(component)
        return component

    def remove_components(self, component_type: type) -> None:
        """Mark every component of the given type for destruction."""
        for component in list(self._components):
            if isinstance(component, component_type):
                self._mark_to_destroy(component)

    def remove_component(self, component_id: int) -> None:
        """Mark the component with this id for destruction, if it exists."""
        if component_id <= ROOT_ID:
            raise ValueError("the root transform cannot be removed")
        component = self.get_component(component_id)
        if component is not None:
            self._mark_to_destroy(component)

    def get_components(self, component_type: type[C]) -> list[C]:
        return [c for c in self._components if isinstance(c, component_type)]

    def get_component(self, component_id: int) -> Component | None:
        return next((c for c in self._components if c.id == component_id), None)

    # Connections ---------------------------------------------------------

    def connect(self, sender: Any, receiver: Any) -> None:
        """Connect two pipes owned by components of this object."""
        self._check_pipes(sender, receiver)
        self._messages.connect(sender, receiver)

    def disconnect(self, sender: Any, receiver: Any) -> None:
        """Disconnect two pipes owned by components of this object."""
        self._check_pipes(sender, receiver)
        self._messages.disconnect(sender, receiver)

    # Helpers -------------------------------------------------------------

    def _mark_to_destroy(self, component: Component) -> None:
        if component in self._doomed:
            return
        if component in self._updating:
            self._updating.remove(component)
        if component in self._pending:
            self._pending.remove(component)
        self._doomed.append(component)

    def _check_owned(self, component: Component) -> None:
        if component.game_object is not self or component not in self._components:
            raise ValueError(f"component {component.id} is not owned by object {self.id}")

    def _check_pipes(self, sender: Any, receiver: Any) -> None:
        for pipe in (sender, receiver):
            if getattr(pipe.owner, "game_object", None) is not self:
                raise ValueError(f"pipe is not owned by a component of object {self.id}")

    def __repr__(self) -> str:
        return f"GameObject(id={self.id}, name={self.name!r})"
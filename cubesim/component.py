"""Base class for behaviour attached to a game object."""

from __future__ import annotations

from typing import Any


class Component:
    """A unit of behaviour owned by exactly one game object.

    A component learns its owner and its id when the owner adopts it.
    Anything that needs the owner belongs in ``initialize``, which runs at
    the start of the frame after the component was created.
    """

    def __init__(self) -> None:
        self.game_object: Any = None
        self.id: int = 0

    def initialize(self) -> None:
        """Called once, at the start of the frame after creation."""

    def update(self) -> None:
        """Called every frame while the component is registered for updates."""

    def destroy(self) -> None:
        """Called once, at the end of the frame in which it was removed."""

    def make_connectors(self, message_manager: Any) -> None:
        """Create this component's pipes with the owner's message manager."""

    def register_update_call(self) -> None:
        """Ask the owner to call ``update`` every frame."""
        self._owner().register_update_call(self)

    def unregister_update_call(self) -> None:
        """Stop receiving ``update`` calls."""
        self._owner().unregister_update_call(self)

    def _owner(self) -> Any:
        if self.game_object is None:
            raise RuntimeError("component is not attached to an object")
        return self.game_object
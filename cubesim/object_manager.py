"""Owns the objects of a scene and drives them frame by frame."""

from __future__ import annotations

from typing import Any

from .component import Component
from .entity import GameObject


class ObjectManager:
    """Creates, updates and destroys the objects of one scene.

    Objects created during a frame start running in the next one; objects
    marked for destruction are skipped by updates and torn down, with all
    their components, at the end of the frame.
    """

    def __init__(self, scene: Any) -> None:
        self.scene = scene
        self._next_object_id = 0
        self._objects: list[GameObject] = []
        self._pending: list[GameObject] = []
        self._doomed: list[GameObject] = []

    @property
    def objects(self) -> tuple[GameObject, ...]:
        return tuple(self._objects)

    def process_frame(self) -> None:
        self.initialize_objects()
        self.update_objects()
        self.destroy_objects()

    def initialize_objects(self) -> None:
        """Initialize the components of objects created since the last call."""
        pending, self._pending = self._pending, []
        for obj in pending:
            obj.initialize_components()

    def update_objects(self) -> None:
        """Run a frame on every live object, most recently created first."""
        for obj in reversed(list(self._objects)):
            if obj in self._pending or obj in self._doomed:
                continue
            obj.process_frame()

    def destroy_objects(self) -> None:
        """Destroy marked objects together with all their components."""
        doomed, self._doomed = self._doomed, []
        for obj in doomed:
            obj.remove_components(Component)
            obj.destroy_components()
            self._objects.remove(obj)

    def create_object(self, name: str = "") -> GameObject:
        obj = GameObject(self, self._next_object_id, name)
        self._next_object_id += 1
        self._objects.append(obj)
        self._pending.append(obj)
        return obj

    def destroy_object(self, object_id: int) -> None:
        """Mark the object with this id for destruction, if it exists."""
        obj = next((o for o in self._objects if o.id == object_id), None)
        if obj is None or obj in self._doomed:
            return
        if obj in self._pending:
            self._pending.remove(obj)
        self._doomed.append(obj)
"""Typed connection pipes between components of one object.

Three kinds of pipes exist:

* properties: a ``PropertyOut`` owns a value that any number of
  ``PropertyIn`` observers may read once connected;
* messages: a ``MessageOut`` forwards a payload to every connected
  ``MessageIn``, which hands it to its owner's handler;
* triggers: a ``TriggerOut`` fires every connected ``TriggerIn`` handler.

A ``MessageManager`` creates the pipes and keeps track of connections.
Owners are components exposing an ``id`` attribute.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
M = TypeVar("M")

_log = logging.getLogger(__name__)


class NotConnectedError(RuntimeError):
    """Raised when reading a property input that has no source."""


class PropertyOut(Generic[T]):
    """Publishes a value owned by a component."""

    def __init__(self, owner: Any, value: T | None = None) -> None:
        self.owner = owner
        self.value = value

    def __repr__(self) -> str:
        return f"PropertyOut(value={self.value!r})"


class PropertyIn(Generic[T]):
    """Reads the value of a connected ``PropertyOut``."""

    def __init__(self, owner: Any) -> None:
        self.owner = owner
        self.source: PropertyOut[T] | None = None

    @property
    def connected(self) -> bool:
        return self.source is not None

    @property
    def value(self) -> T:
        if self.source is None:
            raise NotConnectedError("property input has no source")
        return self.source.value

    def remove_source(self) -> None:
        """Forget the connected source."""
        self.source = None


class MessageOut(Generic[M]):
    """Sends messages to all connected ``MessageIn`` pipes."""

    def __init__(self, owner: Any, manager: MessageManager) -> None:
        self.owner = owner
        self.manager = manager

    def send(self, message: M) -> None:
        self.manager.forward_message(self, message)


class MessageIn(Generic[M]):
    """Passes received messages to the owner's handler."""

    def __init__(self, owner: Any, handler: Callable[[M], Any]) -> None:
        self.owner = owner
        self.handler = handler

    def receive(self, message: M) -> None:
        self.handler(message)


class TriggerOut:
    """Fires all connected ``TriggerIn`` pipes."""

    def __init__(self, owner: Any, manager: MessageManager) -> None:
        self.owner = owner
        self.manager = manager

    def trigger(self) -> None:
        self.manager.forward_trigger(self)


class TriggerIn:
    """Calls the owner's handler when triggered."""

    def __init__(self, owner: Any, handler: Callable[[], Any]) -> None:
        self.owner = owner
        self.handler = handler

    def receive(self) -> None:
        self.handler()


class MessageManager:
    """Creates pipes and routes properties, messages and triggers."""

    def __init__(self) -> None:
        self._property_connections: list[tuple[PropertyOut, PropertyIn]] = []
        self._message_connections: dict[MessageOut, list[MessageIn]] = {}
        self._trigger_connections: dict[TriggerOut, list[TriggerIn]] = {}

    # Factories -----------------------------------------------------------

    def make_property_out(self, owner: Any, value: Any = None) -> PropertyOut:
        return PropertyOut(owner, value)

    def make_property_in(self, owner: Any) -> PropertyIn:
        return PropertyIn(owner)

    def make_message_out(self, owner: Any) -> MessageOut:
        return MessageOut(owner, self)

    def make_message_in(self, owner: Any, handler: Callable[[Any], Any]) -> MessageIn:
        return MessageIn(owner, handler)

    def make_trigger_out(self, owner: Any) -> TriggerOut:
        return TriggerOut(owner, self)

    def make_trigger_in(self, owner: Any, handler: Callable[[], Any]) -> TriggerIn:
        return TriggerIn(owner, handler)

    # Connections ---------------------------------------------------------

    def connect(self, sender: Any, receiver: Any) -> None:
        """Connect a pair of matching pipes.

        A property input that already has a source is left unchanged.
        """
        if isinstance(sender, PropertyOut) and isinstance(receiver, PropertyIn):
            if receiver.source is None:
                receiver.source = sender
                self._property_connections.append((sender, receiver))
            else:
                _log.debug("property input already connected; ignoring")
        elif isinstance(sender, MessageOut) and isinstance(receiver, MessageIn):
            self._message_connections.setdefault(sender, []).append(receiver)
        elif isinstance(sender, TriggerOut) and isinstance(receiver, TriggerIn):
            self._trigger_connections.setdefault(sender, []).append(receiver)
        else:
            raise TypeError(
                f"cannot connect {type(sender).__name__} to {type(receiver).__name__}"
            )

    def disconnect(self, sender: Any, receiver: Any) -> None:
        """Remove a connection between two pipes; absent ones are ignored."""
        if isinstance(sender, PropertyOut) and isinstance(receiver, PropertyIn):
            kept = []
            for subject, observer in self._property_connections:
                if subject is sender and observer is receiver:
                    observer.remove_source()
                else:
                    kept.append((subject, observer))
            self._property_connections = kept
        elif isinstance(sender, MessageOut) and isinstance(receiver, MessageIn):
            self._remove_receiver(self._message_connections, sender, receiver)
        elif isinstance(sender, TriggerOut) and isinstance(receiver, TriggerIn):
            self._remove_receiver(self._trigger_connections, sender, receiver)
        else:
            raise TypeError(
                f"cannot disconnect {type(sender).__name__} from {type(receiver).__name__}"
            )

    @staticmethod
    def _remove_receiver(table: dict, sender: Any, receiver: Any) -> None:
        receivers = table.get(sender)
        if receivers is not None:
            table[sender] = [r for r in receivers if r is not receiver]

    # Routing -------------------------------------------------------------

    def forward_message(self, sender: MessageOut, message: Any) -> None:
        for receiver in list(self._message_connections.get(sender, ())):
            receiver.receive(message)

    def forward_trigger(self, sender: TriggerOut) -> None:
        for receiver in list(self._trigger_connections.get(sender, ())):
            receiver.receive()

    def remove_connections(self, component: Any) -> None:
        """Drop every connection that involves the given component.

        Property inputs whose source belonged to the component lose it.
        """
        comp_id = component.id

        kept = []
        for subject, observer in self._property_connections:
            if observer.owner.id == comp_id:
                continue
            if subject.owner.id == comp_id:
                observer.remove_source()
                continue
            kept.append((subject, observer))
        self._property_connections = kept

        for table in (self._message_connections, self._trigger_connections):
            for sender in list(table):
                if sender.owner.id == comp_id:
                    del table[sender]
                else:
                    table[sender] = [r for r in table[sender] if r.owner.id != comp_id]
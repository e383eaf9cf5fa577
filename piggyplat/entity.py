"""Entities and the components that give them behaviour."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from piggyplat.messages import Message, MessageType


class VitalComponent:
    """Base for the physics and render components every entity owns.

    ``handled_types`` names the message types a component claims by default.
    It is empty here, so a plain vital component handles no messages.
    """

    handled_types: ClassVar[frozenset[MessageType]] = frozenset()

    def __init__(self) -> None:
        self._entity: Entity | None = None
        self.age = 0.0

    @property
    def entity(self) -> Entity | None:
        return self._entity

    def attach(self, entity: Entity) -> None:
        """Bind this component to ``entity`` and run the attach hook."""
        self._entity = entity
        self.on_attach()

    def on_attach(self) -> None:
        """Hook run after the component has been attached; restarts its age."""
        self.age = 0.0

    def update(self, delta_t: float) -> None:
        """Advance the component by ``delta_t`` seconds."""
        self.age += delta_t

    def handle_message(self, message: Message) -> bool:
        """Return True if the message was handled."""
        return message.type in self.handled_types


class PhysicsComponent(VitalComponent):
    """Gives an entity its physical presence."""


class RenderComponent(VitalComponent):
    """Gives an entity its visual representation."""


class Component(ABC):
    """A piece of gameplay behaviour attached to an entity.

    ``handled_types`` names the message types a component claims by default.
    """

    handled_types: ClassVar[frozenset[MessageType]] = frozenset()

    def __init__(self) -> None:
        self._entity: Entity | None = None

    @property
    def entity(self) -> Entity | None:
        return self._entity

    def attach(self, entity: Entity) -> None:
        """Bind this component to ``entity`` and join its component list."""
        self._entity = entity
        entity._add_component(self)

    @abstractmethod
    def update(self, delta_t: float) -> None:
        """Advance the component by ``delta_t`` seconds."""

    def handle_message(self, message: Message) -> bool:
        """Return True if the message was handled."""
        return message.type in self.handled_types

    def send_message(self, message: Message, stop_when_received: bool) -> None:
        """Pass ``message`` to every component of the owning entity."""
        if self._entity is None:
            raise RuntimeError("component is not attached to an entity")
        self._entity.handle_message(message, stop_when_received)


class Entity:
    """Anything in the game world: a character, a prop, level geometry."""

    def __init__(
        self,
        physics_component: PhysicsComponent,
        render_component: RenderComponent,
    ) -> None:
        self._components: list[Component] = []
        self.physics_component = physics_component
        physics_component.attach(self)
        self.render_component = render_component
        render_component.attach(self)

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def _add_component(self, component: Component) -> None:
        self._components.append(component)

    def update(self, delta_t: float) -> None:
        """Update physics, then rendering, then the other components."""
        self.physics_component.update(delta_t)
        self.render_component.update(delta_t)
        for component in self._components:
            component.update(delta_t)

    def handle_message(self, message: Message, stop_when_received: bool) -> None:
        """Offer ``message`` to each component in turn.

        With ``stop_when_received`` the first component that handles it ends
        the delivery.
        """
        receivers = [self.physics_component, self.render_component, *self._components]
        for receiver in receivers:
            if receiver.handle_message(message) and stop_when_received:
                return
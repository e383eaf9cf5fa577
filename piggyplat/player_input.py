"""Turns keyboard events into movement and jump messages."""

from __future__ import annotations

import math

from piggyplat.entity import Component
from piggyplat.messages import Message, MessageType

# Key events the component responds to: press and release of each key.
KEY_EVENTS = (
    "space",
    "space-up",
    "w",
    "w-up",
    "a",
    "a-up",
    "s",
    "s-up",
    "d",
    "d-up",
)


class PlayerInputComponent(Component):
    """Receives player key events and sends messages other components act on."""

    def __init__(self) -> None:
        super().__init__()
        self._forward = False
        self._backward = False
        self._right = False
        self._left = False

    def set_key(self, key_name: str) -> None:
        """Handle one key event such as ``"w"`` or ``"w-up"``."""
        if key_name == "space":
            self.send_message(Message(MessageType.JUMP_INPUT, 1.0), True)
        elif key_name == "space-up":
            self.send_message(Message(MessageType.JUMP_INPUT, 0.0), True)
        elif key_name == "w":
            self._forward = True
        elif key_name == "w-up":
            self._forward = False
        elif key_name == "s":
            self._backward = True
        elif key_name == "s-up":
            self._backward = False
        elif key_name == "d":
            self._right = True
        elif key_name == "d-up":
            self._right = False
        elif key_name == "a":
            self._left = True
        elif key_name == "a-up":
            self._left = False

    def update(self, delta_t: float) -> None:
        """Send the current movement input to the entity."""
        self.send_message(
            Message.from_vector(MessageType.MOVE_INPUT, self.move_vector()), True
        )

    def move_vector(self) -> tuple[float, float]:
        """The held direction keys as a unit vector, or zero when none apply."""
        x = float(self._right) - float(self._left)
        y = float(self._forward) - float(self._backward)
        length = math.hypot(x, y)
        if length == 0:
            return (x, y)
        return (x / length, y / length)
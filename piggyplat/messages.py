"""Messages that components of one entity pass to each other."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class MessageType(Enum):
    """What a message is about."""

    UNSET = auto()

    MOVE_INPUT = auto()
    JUMP_INPUT = auto()

    MOVE_SPEED = auto()
    MOVE_DIR = auto()
    VERT_SPEED = auto()
    GROUND_DIST = auto()


@dataclass(frozen=True)
class Message:
    """A typed message carrying up to two numbers."""

    type: MessageType
    value_a: float = 0.0
    value_b: float = 0.0

    @classmethod
    def from_vector(
        cls, message_type: MessageType, vector: tuple[float, float]
    ) -> Message:
        """Build a message whose two values are the components of ``vector``."""
        x, y = vector
        return cls(message_type, float(x), float(y))

    @property
    def vector(self) -> tuple[float, float]:
        """Both values as an ``(x, y)`` pair."""
        return (self.value_a, self.value_b)
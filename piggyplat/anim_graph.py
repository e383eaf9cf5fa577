"""Layered animation graphs and the named weights that drive them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from piggyplat.anim_nodes import AnimNode
    from piggyplat.current_anim import CurrentAnim
    from piggyplat.state_machine import StateMachineAnimNode


class AnimWeightName(Enum):
    """Names of the weight values an animation graph stores."""

    FREE_1 = auto()
    FREE_2 = auto()
    FREE_3 = auto()
    FREE_4 = auto()
    FREE_5 = auto()

    MOVE_SPEED = auto()
    VERT_SPEED = auto()
    GROUND_DIST = auto()


@dataclass(frozen=True)
class _Layer:
    root_node: AnimNode
    weight: float


class AnimGraph:
    """A stack of weighted node trees that decide how strongly each clip shows."""

    def __init__(self) -> None:
        self._layers: list[_Layer] = []
        self._weights: dict[AnimWeightName, float] = {}
        self._state_machines: list[StateMachineAnimNode] = []

    def add_layer(self, root_node: AnimNode, layer_weight: float = 1.0) -> None:
        """Add a node tree whose influence is scaled by ``layer_weight``."""
        self._layers.append(_Layer(root_node, layer_weight))

    def get_weight(self, weight_name: AnimWeightName) -> float:
        """Return a stored weight, or 0.0 if it was never set."""
        return self._weights.get(weight_name, 0.0)

    def set_weight(self, weight_name: AnimWeightName, value: float) -> None:
        self._weights[weight_name] = value

    def get_influence(self, anim_index: int, current_anim: CurrentAnim) -> float:
        """Sum every layer's influence on the clip ``anim_index``."""
        return sum(
            (
                layer.weight * layer.root_node.get_influence(anim_index, current_anim)
                for layer in self._layers
            ),
            0.0,
        )

    def register_state_machine(
        self, state_machine: StateMachineAnimNode | None
    ) -> None:
        """Have ``update`` advance this state machine; ``None`` is ignored."""
        if state_machine is not None:
            self._state_machines.append(state_machine)

    def update(self, delta_t: float) -> None:
        """Advance every registered state machine by ``delta_t`` seconds."""
        for state_machine in self._state_machines:
            state_machine.update(delta_t)
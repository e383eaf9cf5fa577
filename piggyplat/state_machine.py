"""A state machine node that crossfades between child nodes on weight triggers."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from piggyplat.anim_graph import AnimWeightName
from piggyplat.anim_nodes import AnimNode

if TYPE_CHECKING:
    from piggyplat.anim_graph import AnimGraph
    from piggyplat.current_anim import CurrentAnim

# Single-precision limits used for trigger ranges.
_FLT_MIN = 1.1754943508222875e-38
_FLT_MAX = 3.4028234663852886e38
_FLT_EPSILON = 1.1920928955078125e-07


class Comparator(Enum):
    """How a weight is compared with a transition's trigger value."""

    LESS_THAN = auto()
    LESS_THAN_EQUALS = auto()
    EQUALS = auto()
    GREATER_THAN_EQUALS = auto()
    GREATER_THAN = auto()


@dataclass(frozen=True)
class Transition:
    """Fires while a weight lies strictly between ``min_value`` and ``max_value``."""

    trigger_weight: AnimWeightName = AnimWeightName.FREE_1
    min_value: float = _FLT_MIN
    max_value: float = 0.5
    connected_state: int = 0
    transition_time: float = 0.5

    def is_triggered_by(self, weight: float) -> bool:
        return self.min_value < weight < self.max_value


def make_transition(
    trigger_weight: AnimWeightName,
    comparator: Comparator,
    trigger_value: float,
    connected_state: int,
    transition_time: float,
) -> Transition:
    """Build a transition whose open range expresses ``comparator``.

    The lower bound of the "less than" comparators is the smallest positive
    normal single-precision value, so they never fire for zero or negative
    weights.
    """
    if comparator is Comparator.LESS_THAN:
        bounds = (_FLT_MIN, trigger_value)
    elif comparator is Comparator.LESS_THAN_EQUALS:
        bounds = (_FLT_MIN, trigger_value + _FLT_EPSILON)
    elif comparator is Comparator.EQUALS:
        bounds = (trigger_value - _FLT_EPSILON, trigger_value + _FLT_EPSILON)
    elif comparator is Comparator.GREATER_THAN_EQUALS:
        bounds = (trigger_value - _FLT_EPSILON, _FLT_MAX)
    elif comparator is Comparator.GREATER_THAN:
        bounds = (trigger_value, _FLT_MAX)
    else:
        raise ValueError(f"unknown comparator: {comparator!r}")
    return Transition(
        trigger_weight=trigger_weight,
        min_value=bounds[0],
        max_value=bounds[1],
        connected_state=connected_state,
        transition_time=transition_time,
    )


class StateMachineAnimNode(AnimNode):
    """Each state is an AnimNode; triggered transitions crossfade between them."""

    def __init__(self, start_state: AnimNode, graph: AnimGraph | None) -> None:
        super().__init__(graph)
        self._states: list[AnimNode] = [start_state]
        self._transitions: defaultdict[int, list[Transition]] = defaultdict(list)
        self._current = 0
        self._next = -1
        self._speed = 0.0
        self._timer = 0.0
        if graph is not None:
            graph.register_state_machine(self)

    def _has_state(self, index: int) -> bool:
        return 0 <= index < len(self._states)

    def get_influence(self, anim_index: int, current_anim: CurrentAnim) -> float:
        if not self._has_state(self._current):
            return 0.0
        current = self._states[self._current]
        if self._timer <= 0 or not self._has_state(self._next):
            return current.get_influence(anim_index, current_anim)
        upcoming = self._states[self._next]
        current_part = current.get_influence(anim_index, current_anim) * self._timer
        next_part = upcoming.get_influence(anim_index, current_anim) * (
            1.0 - self._timer
        )
        return current_part + next_part

    def add_state(self, anim_node: AnimNode) -> int:
        """Add a state and return its index."""
        self._states.append(anim_node)
        return len(self._states) - 1

    def add_transition(
        self,
        source: int,
        target: int,
        trigger_weight: AnimWeightName,
        comparator: Comparator,
        trigger_value: float,
        transition_time: float = 0.5,
    ) -> None:
        self._transitions[source].append(
            make_transition(
                trigger_weight, comparator, trigger_value, target, transition_time
            )
        )

    def update(self, delta_t: float) -> None:
        """Check the current state's triggers, then advance any crossfade."""
        self._check_triggers()
        self._advance_transition(delta_t)

    def _check_triggers(self) -> None:
        if self._next > 0:
            return
        for transition in self._transitions.get(self._current, ()):
            if transition.is_triggered_by(self._weight(transition.trigger_weight)):
                self._next = transition.connected_state
                self._timer = 0.0
                if transition.transition_time == 0:
                    self._speed = math.inf
                else:
                    self._speed = 1.0 / transition.transition_time
                return

    def _advance_transition(self, delta_t: float) -> None:
        if self._next < 0:
            return
        self._timer += self._speed * delta_t
        if self._timer >= 1:
            self._timer = 0.0
            self._speed = 0.0
            self._current = self._next
            self._next = -1
"""Nodes that make up an animation graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from piggyplat.anim_graph import AnimWeightName

if TYPE_CHECKING:
    from piggyplat.anim_graph import AnimGraph
    from piggyplat.current_anim import CurrentAnim


class AnimNode(ABC):
    """A node that says how strongly a clip contributes to the final pose."""

    def __init__(self, graph: AnimGraph | None) -> None:
        self._graph = graph

    def _weight(self, weight_name: AnimWeightName) -> float:
        """Read a weight from the graph, or 1.0 when the node has no graph."""
        if self._graph is None:
            return 1.0
        return self._graph.get_weight(weight_name)

    @abstractmethod
    def get_influence(self, anim_index: int, current_anim: CurrentAnim) -> float:
        """Return a 0-1 influence for clip ``anim_index``.

        ``current_anim`` lets the node steer that clip's playback.
        """


class BlendAnimNode(AnimNode):
    """Blends two child nodes according to a weight value."""

    def __init__(
        self,
        left_node: AnimNode,
        right_node: AnimNode,
        weight_name: AnimWeightName,
        graph: AnimGraph | None,
    ) -> None:
        super().__init__(graph)
        self._left = left_node
        self._right = right_node
        self._weight_name = weight_name

    def get_influence(self, anim_index: int, current_anim: CurrentAnim) -> float:
        weight = self._weight(self._weight_name)
        if weight <= 0:
            return self._left.get_influence(anim_index, current_anim)
        if weight >= 1:
            return self._right.get_influence(anim_index, current_anim)
        left = self._left.get_influence(anim_index, current_anim)
        right = self._right.get_influence(anim_index, current_anim)
        return left * (1.0 - weight) + right * weight


class SingleAnimNode(AnimNode):
    """Plays a single clip."""

    def __init__(
        self, anim_index: int, looping: bool, graph: AnimGraph | None
    ) -> None:
        super().__init__(graph)
        self._anim_id = anim_index
        self._looping = looping

    def get_influence(self, anim_index: int, current_anim: CurrentAnim) -> float:
        if anim_index == self._anim_id:
            current_anim.play_anim(self._looping)
            return 1.0
        current_anim.stop_anim()
        return 0.0


class DrivenPoseAnimNode(AnimNode):
    """Holds a clip at a position set by a weight instead of playing it."""

    def __init__(
        self,
        anim_index: int,
        driver_weight: AnimWeightName,
        graph: AnimGraph | None,
    ) -> None:
        super().__init__(graph)
        self._anim_id = anim_index
        self._driver = driver_weight

    def get_influence(self, anim_index: int, current_anim: CurrentAnim) -> float:
        if anim_index != self._anim_id:
            return 0.0
        current_anim.set_anim_relative_time(self._weight(self._driver))
        return 1.0
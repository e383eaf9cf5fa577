import pytest

from piggyplat.anim_graph import AnimGraph, AnimWeightName


class FixedNode:
    def __init__(self, influence):
        self.influence = influence
        self.seen = []

    def get_influence(self, anim_index, current_anim):
        self.seen.append((anim_index, current_anim))
        return self.influence


class RecordingMachine:
    def __init__(self, log, name):
        self.log = log
        self.name = name

    def update(self, delta_t):
        self.log.append((self.name, delta_t))


def test_unset_weight_is_zero():
    assert AnimGraph().get_weight(AnimWeightName.MOVE_SPEED) == 0.0


def test_set_weight_round_trip():
    graph = AnimGraph()
    graph.set_weight(AnimWeightName.GROUND_DIST, 0.42)
    assert graph.get_weight(AnimWeightName.GROUND_DIST) == 0.42


def test_weights_are_independent():
    graph = AnimGraph()
    graph.set_weight(AnimWeightName.FREE_1, 0.9)
    assert graph.get_weight(AnimWeightName.FREE_2) == 0.0


def test_set_weight_overwrites():
    graph = AnimGraph()
    graph.set_weight(AnimWeightName.VERT_SPEED, 0.1)
    graph.set_weight(AnimWeightName.VERT_SPEED, -0.6)
    assert graph.get_weight(AnimWeightName.VERT_SPEED) == -0.6


def test_no_layers_means_no_influence():
    assert AnimGraph().get_influence(0, object()) == 0.0


def test_default_layer_weight_is_one():
    graph = AnimGraph()
    graph.add_layer(FixedNode(0.3))
    assert graph.get_influence(2, object()) == pytest.approx(0.3)


def test_layer_weight_scales_influence():
    graph = AnimGraph()
    graph.add_layer(FixedNode(1.0), 0.5)
    assert graph.get_influence(0, object()) == pytest.approx(0.5)


def test_layers_add_up():
    graph = AnimGraph()
    graph.add_layer(FixedNode(1.0), 0.25)
    graph.add_layer(FixedNode(1.0), 0.5)
    assert graph.get_influence(0, object()) == pytest.approx(0.75)


def test_arguments_reach_every_layer():
    graph = AnimGraph()
    first, second = FixedNode(0.0), FixedNode(0.0)
    graph.add_layer(first)
    graph.add_layer(second)
    marker = object()
    graph.get_influence(7, marker)
    assert first.seen == [(7, marker)]
    assert second.seen == [(7, marker)]


def test_update_drives_state_machines_in_order():
    graph = AnimGraph()
    log = []
    graph.register_state_machine(RecordingMachine(log, "a"))
    graph.register_state_machine(RecordingMachine(log, "b"))
    graph.update(0.25)
    assert log == [("a", 0.25), ("b", 0.25)]


def test_none_state_machine_is_ignored():
    graph = AnimGraph()
    log = []
    graph.register_state_machine(None)
    graph.register_state_machine(RecordingMachine(log, "only"))
    graph.update(1.0)
    assert log == [("only", 1.0)]


def test_every_weight_name_has_its_own_slot():
    graph = AnimGraph()
    names = list(AnimWeightName)
    for position, name in enumerate(names, start=1):
        graph.set_weight(name, float(position))
    assert [graph.get_weight(name) for name in names] == [
        float(position) for position in range(1, len(names) + 1)
    ]
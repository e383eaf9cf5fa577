import pytest

from piggyplat.current_anim import CurrentAnim


class FakeControl:
    def __init__(self, playing=False, num_frames=40):
        self.playing = playing
        self.num_frames = num_frames
        self.play_rate = 1.0
        self.calls = []

    def is_playing(self):
        return self.playing

    def loop(self, restart):
        self.calls.append(("loop", restart))

    def play(self):
        self.calls.append(("play",))

    def stop(self):
        self.calls.append(("stop",))

    def pose(self, frame):
        self.calls.append(("pose", frame))


def test_play_looping_starts_loop():
    control = FakeControl()
    CurrentAnim(control).play_anim(True)
    assert control.calls == [("loop", True)]


def test_play_once_starts_play():
    control = FakeControl()
    CurrentAnim(control).play_anim(False)
    assert control.calls == [("play",)]


@pytest.mark.parametrize("looping", [True, False])
def test_play_does_nothing_when_already_playing(looping):
    control = FakeControl(playing=True)
    CurrentAnim(control).play_anim(looping)
    assert control.calls == []


def test_stop():
    control = FakeControl(playing=True)
    CurrentAnim(control).stop_anim()
    assert control.calls == [("stop",)]


def test_set_speed_changes_play_rate():
    control = FakeControl()
    CurrentAnim(control).set_anim_speed(2.5)
    assert control.play_rate == 2.5


def test_relative_time_halfway():
    control = FakeControl(num_frames=40)
    CurrentAnim(control).set_anim_relative_time(0.5)
    assert control.calls == [("pose", pytest.approx(20.0))]


def test_relative_time_end_is_last_frame_count():
    control = FakeControl(num_frames=33)
    CurrentAnim(control).set_anim_relative_time(1.0)
    assert control.calls == [("pose", pytest.approx(33.0))]


def test_relative_time_start_is_frame_zero():
    control = FakeControl(num_frames=33)
    CurrentAnim(control).set_anim_relative_time(0.0)
    assert control.calls == [("pose", 0.0)]
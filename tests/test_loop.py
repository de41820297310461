import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gostty_config import AnimatorConfig
from gostty_loop import AnimationLoop, LoopState, frame_index_for


class FakeClock:
    def __init__(self, start=100.0, step=0.0):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


class RecordingRenderer:
    def __init__(self):
        self.rendered = []
        self.size_checks = 0

    def update_size(self):
        self.size_checks += 1
        return False

    def render_frame(self, frame_index):
        self.rendered.append(frame_index)
        return True


@pytest.mark.parametrize("elapsed_ms, expected", [
    (0, 0),
    (34, 0),
    (35, 1),
    (140, 0),
    (141, 0),
    (176, 1),
])
def test_frame_index_follows_elapsed_time(elapsed_ms, expected):
    assert frame_index_for(elapsed_ms, 4, 35) == expected


def test_tick_selects_frame_from_wall_clock():
    clock = FakeClock()
    renderer = RecordingRenderer()
    loop = AnimationLoop(renderer, 4, clock=clock)

    loop.tick()
    clock.now = 100.176
    loop.tick()
    # A late tick jumps straight to the frame for the current time
    clock.now = 101.176
    loop.tick()

    assert renderer.rendered == [0, 1, frame_index_for(1176, 4)]
    assert renderer.size_checks == 3
    assert loop.state is LoopState.RUNNING


def test_duration_stops_loop_and_rendering():
    clock = FakeClock()
    renderer = RecordingRenderer()
    loop = AnimationLoop(renderer, 4, AnimatorConfig(duration_seconds=10), clock=clock)

    assert loop.tick() is True
    clock.now = 109.999
    assert loop.tick() is True
    clock.now = 110.0
    assert loop.tick() is False

    assert loop.state is LoopState.STOPPED
    assert len(renderer.rendered) == 2

    clock.now = 111.0
    assert loop.tick() is False
    assert len(renderer.rendered) == 2


def test_zero_duration_runs_forever():
    clock = FakeClock()
    renderer = RecordingRenderer()
    loop = AnimationLoop(renderer, 4, AnimatorConfig(duration_seconds=0), clock=clock)

    loop.tick()
    clock.now += 3600.0

    assert loop.tick() is True
    assert loop.running


def test_stop_request_ends_loop_at_next_tick():
    renderer = RecordingRenderer()
    loop = AnimationLoop(renderer, 4, clock=FakeClock())

    loop.tick()
    loop.stop()

    assert loop.tick() is False
    assert loop.state is LoopState.STOPPED
    assert renderer.rendered == [0]


def test_run_returns_immediately_when_already_stopped():
    renderer = RecordingRenderer()
    loop = AnimationLoop(renderer, 4, clock=FakeClock())
    loop.stop()

    loop.run()

    assert loop.state is LoopState.STOPPED
    assert renderer.rendered == []


def test_run_stops_after_duration():
    renderer = RecordingRenderer()
    clock = FakeClock(step=0.5)
    loop = AnimationLoop(renderer, 4, AnimatorConfig(duration_seconds=1), clock=clock)

    loop.run()

    assert loop.state is LoopState.STOPPED
    assert len(renderer.rendered) == 1


def test_loop_requires_frames():
    with pytest.raises(ValueError):
        AnimationLoop(RecordingRenderer(), 0)


def test_invalid_config_is_rejected():
    with pytest.raises(ValueError):
        AnimationLoop(RecordingRenderer(), 4, AnimatorConfig(frame_interval_ms=0))


def test_stop_from_inside_a_wait_takes_effect_on_next_tick(monkeypatch):
    renderer = RecordingRenderer()
    loop = AnimationLoop(renderer, 4, clock=FakeClock(step=0.01))
    sleeps = []

    def sleep(seconds):
        sleeps.append(seconds)
        loop.stop()

    monkeypatch.setattr("gostty_loop.time.sleep", sleep)

    loop.run()

    assert loop.state is LoopState.STOPPED
    assert len(sleeps) == 1
    assert renderer.rendered == [0]

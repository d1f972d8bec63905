"""
Tests for the FrameController playback state machine.
"""
import time

import pytest
from PyQt6.QtTest import QTest

from core.animation_player import FrameController, PlaybackStatus
from core.data_structures import DEFAULT_FRAME_RATE, FrameInfo, Rect, Size


def make_frames(count):
    return [
        FrameInfo(filename=f"f_{i}.png", frame=Rect(i * 8, 0, 8, 8), source_size=Size(8, 8))
        for i in range(count)
    ]


class Recorder:
    """Collects controller signal emissions."""

    def __init__(self, controller):
        self.frames = []
        self.play_states = []
        self.frame_rates = []
        self.looping = []
        controller.frame_changed.connect(lambda index, data: self.frames.append((index, data)))
        controller.play_state_changed.connect(self.play_states.append)
        controller.frame_rate_changed.connect(self.frame_rates.append)
        controller.looping_changed.connect(self.looping.append)

    @property
    def indices(self):
        return [index for index, _ in self.frames]


@pytest.fixture
def frames():
    return make_frames(5)


@pytest.fixture
def controller(qapp, frames):
    def lookup(index):
        if 0 <= index < len(frames):
            return frames[index]
        return None

    controller = FrameController(lookup)
    yield controller
    controller.cleanup()


@pytest.fixture
def recorder(controller):
    return Recorder(controller)


class TestInitialize:
    """initialize and cleanup."""

    def test_new_controller_is_idle(self, controller):
        assert controller.status is PlaybackStatus.IDLE
        assert controller.total_frames == 0
        assert controller.frame_rate == DEFAULT_FRAME_RATE
        assert controller.is_looping

    def test_initialize_resets_to_first_frame(self, controller, recorder, frames):
        controller.initialize(5)
        assert controller.status is PlaybackStatus.STOPPED
        assert controller.current_frame == 0
        assert recorder.frames == [(0, frames[0])]

    def test_initialize_stops_playback(self, controller, recorder):
        controller.initialize(5)
        controller.play()
        controller.set_frame(3)
        controller.initialize(5)
        assert not controller.is_playing
        assert not controller.timer.isActive()
        assert controller.current_frame == 0
        assert recorder.play_states == [True, False]

    def test_cleanup_returns_to_idle(self, controller):
        controller.initialize(5)
        controller.set_frame_rate(30)
        controller.play()
        controller.cleanup()
        assert controller.status is PlaybackStatus.IDLE
        assert controller.frame_rate == DEFAULT_FRAME_RATE
        assert not controller.timer.isActive()


class TestNavigation:
    """set_frame and the convenience wrappers."""

    def test_set_frame_notifies_every_valid_call(self, controller, recorder, frames):
        controller.initialize(5)
        controller.set_frame(2)
        controller.set_frame(2)
        assert recorder.frames[1:] == [(2, frames[2]), (2, frames[2])]

    def test_out_of_range_is_ignored(self, controller, recorder):
        controller.initialize(5)
        controller.set_frame(-1)
        controller.set_frame(5)
        assert controller.current_frame == 0
        assert len(recorder.frames) == 1

    def test_set_frame_fires_while_playing(self, controller, recorder):
        controller.initialize(5)
        controller.play()
        controller.set_frame(3)
        assert recorder.indices[-1] == 3
        assert controller.is_playing

    def test_progress_endpoints(self, controller):
        for total in (1, 2, 5, 37):
            controller.initialize(total)
            controller.set_frame_from_progress(1.0)
            assert controller.current_frame == total - 1
            controller.set_frame_from_progress(0.0)
            assert controller.current_frame == 0

    def test_progress_floors(self, controller):
        controller.initialize(5)
        controller.set_frame_from_progress(0.74)  # 0.74 * 4 = 2.96
        assert controller.current_frame == 2

    def test_progress_outside_range_is_ignored(self, controller, recorder):
        controller.initialize(5)
        controller.set_frame(2)
        controller.set_frame_from_progress(-0.2)
        controller.set_frame_from_progress(1.5)
        assert controller.current_frame == 2
        assert len(recorder.frames) == 2

    def test_non_finite_progress_is_ignored(self, controller, recorder):
        controller.initialize(5)
        controller.set_frame(3)
        for value in (float("nan"), float("inf"), float("-inf")):
            controller.set_frame_from_progress(value)
        assert controller.current_frame == 3
        assert len(recorder.frames) == 2

    def test_previous_frame_wraps_without_loop(self, controller):
        controller.initialize(5)
        controller.set_looping(False)
        controller.previous_frame()
        assert controller.current_frame == 4
        controller.previous_frame()
        assert controller.current_frame == 3

    def test_first_and_last(self, controller):
        controller.initialize(5)
        controller.go_to_last_frame()
        assert controller.current_frame == 4
        controller.go_to_first_frame()
        assert controller.current_frame == 0

    def test_skip_frames_clamps(self, controller):
        controller.initialize(5)
        controller.skip_frames(3)
        assert controller.current_frame == 3
        controller.skip_frames(10)
        assert controller.current_frame == 4
        controller.skip_frames(-10)
        assert controller.current_frame == 0

    def test_navigation_on_empty_controller(self, controller, recorder):
        controller.next_frame()
        controller.previous_frame()
        controller.go_to_last_frame()
        controller.skip_frames(2)
        controller.set_frame_from_progress(0.5)
        assert recorder.frames == []

    def test_lookup_result_is_forwarded(self, controller, recorder):
        controller.initialize(10)  # lookup only knows 5 frames
        controller.set_frame(7)
        assert recorder.frames[-1] == (7, None)
        assert controller.get_current_frame_data() is None


class TestNextFrame:
    """Boundary behaviour of next_frame."""

    def test_loops_to_start(self, controller):
        controller.initialize(5)
        controller.set_frame(4)
        controller.next_frame()
        assert controller.current_frame == 0

    def test_holds_last_frame_and_pauses(self, controller, recorder):
        controller.initialize(5)
        controller.set_looping(False)
        controller.play()
        controller.set_frame(4)
        count = len(recorder.frames)
        controller.next_frame()
        assert controller.current_frame == 4
        assert not controller.is_playing
        assert len(recorder.frames) == count
        assert recorder.play_states == [True, False]


class TestPlayback:
    """play, pause, stop and frame rate."""

    def test_play_starts_timer(self, controller, recorder):
        controller.initialize(5)
        controller.set_frame_rate(10)
        controller.play()
        assert controller.status is PlaybackStatus.PLAYING
        assert controller.timer.isActive()
        assert controller.timer.interval() == 100
        assert recorder.play_states == [True]

    def test_play_requires_two_frames(self, controller, recorder):
        controller.initialize(1)
        controller.play()
        assert not controller.is_playing
        assert recorder.play_states == []

    def test_play_twice_is_noop(self, controller, recorder):
        controller.initialize(5)
        controller.play()
        controller.play()
        assert recorder.play_states == [True]

    def test_pause_when_stopped_is_noop(self, controller, recorder):
        controller.initialize(5)
        controller.pause()
        assert recorder.play_states == []

    def test_stop_rewinds(self, controller):
        controller.initialize(5)
        controller.play()
        controller.set_frame(3)
        controller.stop()
        assert not controller.is_playing
        assert controller.current_frame == 0

    def test_toggle_play(self, controller):
        controller.initialize(5)
        controller.toggle_play()
        assert controller.is_playing
        controller.toggle_play()
        assert not controller.is_playing

    def test_frame_rate_bounds(self, controller, recorder):
        controller.set_frame_rate(0)
        controller.set_frame_rate(61)
        assert controller.frame_rate == DEFAULT_FRAME_RATE
        controller.set_frame_rate(60)
        controller.set_frame_rate(1)
        assert recorder.frame_rates == [60, 1]

    def test_non_finite_frame_rate_is_ignored(self, controller, recorder):
        for value in (float("nan"), float("inf"), float("-inf")):
            controller.set_frame_rate(value)
        assert controller.frame_rate == DEFAULT_FRAME_RATE
        assert recorder.frame_rates == []

    def test_step_frame_rate_clamps(self, controller, recorder):
        controller.step_frame_rate(1)
        assert controller.frame_rate == DEFAULT_FRAME_RATE + 1
        controller.set_frame_rate(60)
        controller.step_frame_rate(1)
        assert controller.frame_rate == 60
        controller.set_frame_rate(1)
        controller.step_frame_rate(-1)
        assert controller.frame_rate == 1
        assert recorder.frame_rates == [DEFAULT_FRAME_RATE + 1, 60, 60, 1, 1]

    def test_frame_rate_change_restarts_timer_in_place(self, controller):
        controller.initialize(5)
        controller.play()
        controller.set_frame(2)
        controller.set_frame_rate(25)
        assert controller.timer.isActive()
        assert controller.timer.interval() == 40
        assert controller.current_frame == 2

    def test_set_looping_notifies_on_change(self, controller, recorder):
        controller.set_looping(True)
        controller.set_looping(False)
        controller.set_looping(False)
        assert recorder.looping == [False]

    def test_stale_tick_does_not_advance(self, controller):
        controller.initialize(5)
        controller._on_timer_tick()
        assert controller.current_frame == 0

    def test_tick_advances(self, controller):
        controller.initialize(5)
        controller.play()
        controller._on_timer_tick()
        controller._on_timer_tick()
        assert controller.current_frame == 2

    def test_state_snapshot(self, controller):
        controller.initialize(5)
        controller.set_frame(2)
        state = controller.get_state()
        assert state.current_frame == 2
        assert state.total_frames == 5
        assert state.progress == pytest.approx(0.5)
        assert state.is_looping


class TestTimedPlayback:
    """Real timer run at 10 fps."""

    def test_plays_through_and_stops_without_loop(self, controller, recorder):
        controller.initialize(5)
        controller.set_frame_rate(10)
        controller.set_looping(False)
        start = time.monotonic()
        controller.play()
        deadline = start + 3.0
        while controller.is_playing and time.monotonic() < deadline:
            QTest.qWait(10)
        elapsed = time.monotonic() - start

        assert not controller.is_playing
        assert recorder.indices == [0, 1, 2, 3, 4]
        assert controller.current_frame == 4
        # four advances plus the pausing tick at ~100 ms each
        assert elapsed >= 0.35

    def test_loops_when_enabled(self, controller, recorder):
        controller.initialize(5)
        controller.set_frame_rate(60)
        controller.play()
        deadline = time.monotonic() + 3.0
        while 0 not in recorder.indices[1:] and time.monotonic() < deadline:
            QTest.qWait(10)
        controller.pause()
        assert recorder.indices[:6] == [0, 1, 2, 3, 4, 0]

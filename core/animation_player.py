"""
Frame Controller
Handles playback, stepping, scrubbing and looping over the frame sequence
"""

import math
from enum import Enum
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, Qt, pyqtSignal

from .data_structures import (
    DEFAULT_FRAME_RATE,
    MAX_FRAME_RATE,
    MIN_FRAME_RATE,
    FrameInfo,
    PlaybackState,
)


FrameLookup = Callable[[int], Optional[FrameInfo]]


class PlaybackStatus(Enum):
    IDLE = "idle"
    STOPPED = "stopped"
    PLAYING = "playing"


class FrameController(QObject):
    """
    Playback state machine over a frame index

    The controller never holds frame data itself; it asks ``frame_lookup``
    for the frame belonging to an index whenever it notifies a change.
    Invalid requests (out of range index or frame rate, playing a single
    frame) are ignored rather than raised, since they come straight from
    interactive input.
    """

    frame_changed = pyqtSignal(int, object)
    play_state_changed = pyqtSignal(bool)
    frame_rate_changed = pyqtSignal(int)
    looping_changed = pyqtSignal(bool)

    def __init__(self, frame_lookup: FrameLookup, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._frame_lookup = frame_lookup
        self._total_frames: int = 0
        self._current_frame: int = 0
        self._playing: bool = False
        self._frame_rate: int = DEFAULT_FRAME_RATE
        self._looping: bool = True

        # Single repeating timer; start() on an active timer restarts it
        self.timer = QTimer(self)
        self.timer.setTimerType(Qt.TimerType.PreciseTimer)
        self.timer.timeout.connect(self._on_timer_tick)

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #
    @property
    def current_frame(self) -> int:
        return self._current_frame

    @property
    def total_frames(self) -> int:
        return self._total_frames

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def frame_rate(self) -> int:
        return self._frame_rate

    @property
    def is_looping(self) -> bool:
        return self._looping

    @property
    def status(self) -> PlaybackStatus:
        if self._total_frames == 0:
            return PlaybackStatus.IDLE
        if self._playing:
            return PlaybackStatus.PLAYING
        return PlaybackStatus.STOPPED

    @property
    def progress(self) -> float:
        """Current position in 0..1"""
        if self._total_frames <= 1:
            return 0.0
        return self._current_frame / (self._total_frames - 1)

    @property
    def frame_interval_ms(self) -> int:
        return max(1, round(1000 / self._frame_rate))

    def get_current_frame_data(self) -> Optional[FrameInfo]:
        return self._frame_lookup(self._current_frame)

    def get_state(self) -> PlaybackState:
        return PlaybackState(
            current_frame=self._current_frame,
            total_frames=self._total_frames,
            is_playing=self._playing,
            frame_rate=self._frame_rate,
            is_looping=self._looping,
            progress=self.progress,
        )

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def initialize(self, total_frames: int):
        """Reset to frame 0 of a sequence with ``total_frames`` frames"""
        self.pause()
        self._total_frames = max(0, int(total_frames))
        self._current_frame = 0
        self._notify_frame_change()

    def cleanup(self):
        """Stop playback and return to the idle state"""
        self.stop()
        self._total_frames = 0
        self._current_frame = 0
        self._frame_rate = DEFAULT_FRAME_RATE

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #
    def set_frame(self, frame_index: int):
        if frame_index < 0 or frame_index >= self._total_frames:
            return
        self._current_frame = int(frame_index)
        self._notify_frame_change()

    def set_frame_from_progress(self, progress: float):
        """Map a scrub position in 0..1 onto a frame index"""
        if not math.isfinite(progress):
            return
        frame_index = math.floor(progress * max(0, self._total_frames - 1))
        self.set_frame(frame_index)

    def next_frame(self):
        if self._total_frames == 0:
            return
        next_index = self._current_frame + 1
        if next_index >= self._total_frames:
            if not self._looping:
                # Hold the last frame
                self.pause()
                return
            next_index = 0
        self.set_frame(next_index)

    def previous_frame(self):
        """Step back one frame; always wraps regardless of looping"""
        if self._total_frames == 0:
            return
        if self._current_frame == 0:
            self.set_frame(self._total_frames - 1)
        else:
            self.set_frame(self._current_frame - 1)

    def go_to_first_frame(self):
        self.set_frame(0)

    def go_to_last_frame(self):
        self.set_frame(self._total_frames - 1)

    def skip_frames(self, count: int):
        target = max(0, min(self._total_frames - 1, self._current_frame + count))
        self.set_frame(target)

    # ------------------------------------------------------------------ #
    # Playback
    # ------------------------------------------------------------------ #
    def play(self):
        if self._playing or self._total_frames <= 1:
            return
        self._playing = True
        self.timer.start(self.frame_interval_ms)
        self.play_state_changed.emit(True)

    def pause(self):
        if not self._playing:
            return
        self._playing = False
        self.timer.stop()
        self.play_state_changed.emit(False)

    def stop(self):
        self.pause()
        self.set_frame(0)

    def toggle_play(self):
        if self._playing:
            self.pause()
        else:
            self.play()

    def set_frame_rate(self, fps: int):
        if not math.isfinite(fps) or fps < MIN_FRAME_RATE or fps > MAX_FRAME_RATE:
            return
        self._frame_rate = int(fps)
        if self._playing:
            self.timer.start(self.frame_interval_ms)
        self.frame_rate_changed.emit(self._frame_rate)

    def step_frame_rate(self, delta: int):
        """Nudge the frame rate by ``delta``, clamped to the supported range"""
        fps = max(MIN_FRAME_RATE, min(MAX_FRAME_RATE, self._frame_rate + delta))
        self.set_frame_rate(fps)

    def set_looping(self, enabled: bool):
        enabled = bool(enabled)
        if enabled == self._looping:
            return
        self._looping = enabled
        self.looping_changed.emit(enabled)

    def _on_timer_tick(self):
        # A tick queued before pause() must not advance
        if not self._playing:
            self.timer.stop()
            return
        self.next_frame()

    def _notify_frame_change(self):
        self.frame_changed.emit(self._current_frame, self._frame_lookup(self._current_frame))

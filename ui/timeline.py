"""
Timeline Widget
Scrub bar mapping a slider position onto playback progress
"""

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QSlider, QLabel
from PyQt6.QtCore import Qt, pyqtSignal


class TimelineWidget(QWidget):
    """Scrub slider; positions are reported as progress in 0..1"""

    SLIDER_RESOLUTION = 1000

    progress_changed = pyqtSignal(float)
    scrub_started = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._total_frames: int = 0
        self.init_ui()

    def init_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.timeline_slider = QSlider(Qt.Orientation.Horizontal)
        self.timeline_slider.setRange(0, self.SLIDER_RESOLUTION)
        self.timeline_slider.setEnabled(False)
        self.timeline_slider.valueChanged.connect(self._on_slider_value_changed)
        self.timeline_slider.sliderPressed.connect(self.scrub_started.emit)
        layout.addWidget(self.timeline_slider, stretch=1)

        self.position_label = QLabel("0 / 0")
        self.position_label.setMinimumWidth(80)
        layout.addWidget(self.position_label)

    def set_frame_count(self, total_frames: int):
        self._total_frames = max(0, total_frames)
        self.timeline_slider.setEnabled(self._total_frames > 1)
        self.set_current_frame(0)

    def set_current_frame(self, frame_index: int):
        """Move the handle to ``frame_index`` without emitting progress"""
        if self._total_frames > 1:
            value = round(frame_index / (self._total_frames - 1) * self.SLIDER_RESOLUTION)
        else:
            value = 0
        self.timeline_slider.blockSignals(True)
        self.timeline_slider.setValue(value)
        self.timeline_slider.blockSignals(False)
        shown = frame_index + 1 if self._total_frames else 0
        self.position_label.setText(f"{shown} / {self._total_frames}")

    def _on_slider_value_changed(self, value: int):
        self.progress_changed.emit(value / self.SLIDER_RESOLUTION)

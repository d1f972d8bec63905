"""
Control Panel
Playback buttons, frame rate and loop controls
"""

from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QLabel, QPushButton, QSpinBox, QCheckBox
)
from PyQt6.QtCore import pyqtSignal

from core.data_structures import DEFAULT_FRAME_RATE, MAX_FRAME_RATE, MIN_FRAME_RATE


class ControlPanel(QWidget):
    """Playback controls; emits requests and mirrors controller state"""
    
    # Signals
    open_clicked = pyqtSignal()
    play_toggled = pyqtSignal()
    stop_clicked = pyqtSignal()
    step_backward_clicked = pyqtSignal()
    step_forward_clicked = pyqtSignal()
    first_frame_clicked = pyqtSignal()
    last_frame_clicked = pyqtSignal()
    fps_changed = pyqtSignal(int)
    loop_toggled = pyqtSignal(bool)
    
    def __init__(self, parent=None):
        super().__init__(parent)
        self.init_ui()
        self.set_playback_enabled(False)
    
    def init_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        
        self.open_btn = QPushButton("Open Atlas...")
        self.open_btn.clicked.connect(self.open_clicked.emit)
        layout.addWidget(self.open_btn)
        layout.addSpacing(12)
        
        self.first_btn = QPushButton("|<")
        self.first_btn.setToolTip("First frame (Home)")
        self.first_btn.clicked.connect(self.first_frame_clicked.emit)
        layout.addWidget(self.first_btn)
        
        self.prev_btn = QPushButton("<")
        self.prev_btn.setToolTip("Previous frame (Left)")
        self.prev_btn.clicked.connect(self.step_backward_clicked.emit)
        layout.addWidget(self.prev_btn)
        
        self.play_btn = QPushButton("Play")
        self.play_btn.setToolTip("Play / pause (Space)")
        self.play_btn.clicked.connect(self.play_toggled.emit)
        layout.addWidget(self.play_btn)
        
        self.stop_btn = QPushButton("Stop")
        self.stop_btn.clicked.connect(self.stop_clicked.emit)
        layout.addWidget(self.stop_btn)
        
        self.next_btn = QPushButton(">")
        self.next_btn.setToolTip("Next frame (Right)")
        self.next_btn.clicked.connect(self.step_forward_clicked.emit)
        layout.addWidget(self.next_btn)
        
        self.last_btn = QPushButton(">|")
        self.last_btn.setToolTip("Last frame (End)")
        self.last_btn.clicked.connect(self.last_frame_clicked.emit)
        layout.addWidget(self.last_btn)
        layout.addSpacing(12)
        
        layout.addWidget(QLabel("FPS:"))
        self.fps_spin = QSpinBox()
        self.fps_spin.setRange(MIN_FRAME_RATE, MAX_FRAME_RATE)
        self.fps_spin.setValue(DEFAULT_FRAME_RATE)
        self.fps_spin.valueChanged.connect(self.fps_changed.emit)
        layout.addWidget(self.fps_spin)
        
        self.loop_checkbox = QCheckBox("Loop")
        self.loop_checkbox.setToolTip("Toggle looping (L)")
        self.loop_checkbox.setChecked(True)
        self.loop_checkbox.toggled.connect(self.loop_toggled.emit)
        layout.addWidget(self.loop_checkbox)
        layout.addStretch()
    
    def set_playback_enabled(self, enabled: bool):
        """Enable the transport buttons once an atlas is loaded"""
        for button in (self.first_btn, self.prev_btn, self.play_btn,
                       self.stop_btn, self.next_btn, self.last_btn):
            button.setEnabled(enabled)
    
    def update_play_state(self, is_playing: bool):
        self.play_btn.setText("Pause" if is_playing else "Play")
    
    def update_frame_rate(self, fps: int):
        # Mirror without re-emitting fps_changed
        self.fps_spin.blockSignals(True)
        self.fps_spin.setValue(fps)
        self.fps_spin.blockSignals(False)
    
    def update_looping(self, enabled: bool):
        self.loop_checkbox.blockSignals(True)
        self.loop_checkbox.setChecked(enabled)
        self.loop_checkbox.blockSignals(False)

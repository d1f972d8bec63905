"""
Frame Info Panel
Shows the current frame name and index and offers a jump-to-frame prompt
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton, QInputDialog
from PyQt6.QtCore import pyqtSignal

from core.data_structures import FrameInfo


class FrameInfoPanel(QWidget):
    """Read-only view of the active frame"""

    frame_jump_requested = pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._current_frame: int = 0
        self._total_frames: int = 0

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel("Frame:"))
        self.name_label = QLabel("-")
        layout.addWidget(self.name_label, stretch=1)
        self.index_label = QLabel("0 / 0")
        layout.addWidget(self.index_label)
        self.size_label = QLabel("")
        layout.addWidget(self.size_label)
        self.jump_btn = QPushButton("Go to...")
        self.jump_btn.setEnabled(False)
        self.jump_btn.clicked.connect(self.prompt_for_frame_jump)
        layout.addWidget(self.jump_btn)

    def update_frame_info(self, frame_index: int, total_frames: int, frame_data: Optional[FrameInfo]):
        self._current_frame = frame_index
        self._total_frames = total_frames
        self.name_label.setText(frame_data.filename if frame_data else "-")
        self.index_label.setText(f"{frame_index} / {max(0, total_frames - 1)}")
        if frame_data is not None:
            source = frame_data.source_size
            flags = " (rotated)" if frame_data.rotated else ""
            self.size_label.setText(f"{source.w:g}x{source.h:g}{flags}")
        else:
            self.size_label.setText("")
        self.jump_btn.setEnabled(total_frames > 0)

    def prompt_for_frame_jump(self):
        if self._total_frames == 0:
            return
        frame_index, ok = QInputDialog.getInt(
            self,
            "Jump to Frame",
            f"Jump to frame (0-{self._total_frames - 1}):",
            self._current_frame,
            0,
            self._total_frames - 1,
        )
        if ok:
            self.frame_jump_requested.emit(frame_index)

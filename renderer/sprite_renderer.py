"""
Sprite Renderer
Turns frame indices from the controller into display transforms for the
rendering surface
"""

from typing import Any, Dict, Optional, Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from core.data_structures import CanvasConfig, DEFAULT_CANVAS_CONFIG, DisplayTransform, FrameInfo, Size
from core.geometry import compute_display_transform, max_source_size, compute_scale_factor


class SpriteRenderer(QObject):
    """
    Render-target adapter

    Holds the frame list of the loaded atlas (by reference) and the scale
    factor shared by all of its frames. Each ``set_frame`` recomputes the
    transform of that frame and announces it through ``frame_applied``.
    """

    frame_applied = pyqtSignal(int, object, object)
    render_error = pyqtSignal(str)

    def __init__(self, config: CanvasConfig = DEFAULT_CANVAS_CONFIG, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.config = config
        self.frames: Sequence[FrameInfo] = ()
        self.scale_factor: float = 1.0
        self.original_size: Size = Size(0, 0)
        self.current_frame_index: int = 0
        self.current_transform: Optional[DisplayTransform] = None

    def load_frames(self, frames: Sequence[FrameInfo]):
        """Adopt a new frame list and compute its scale factor"""
        self.frames = frames
        self.current_frame_index = 0
        self.current_transform = None
        self.calculate_scaling()

    def calculate_scaling(self):
        self.original_size = max_source_size(self.frames)
        self.scale_factor = compute_scale_factor(
            self.original_size,
            self.config.width,
            self.config.height,
            self.config.padding,
        )

    def set_frame(self, frame_index: int) -> bool:
        """
        Apply the transform for ``frame_index``

        Returns:
            True if the frame was applied, False if it was rejected
        """
        if frame_index < 0 or frame_index >= len(self.frames):
            self.render_error.emit(f"Failed to display frame {frame_index}")
            return False
        frame = self.frames[frame_index]
        self.current_frame_index = frame_index
        self.current_transform = compute_display_transform(frame, self.scale_factor, self.config.center)
        self.frame_applied.emit(frame_index, frame, self.current_transform)
        return True

    def on_frame_changed(self, frame_index: int, _frame_data: Optional[FrameInfo] = None):
        """Slot for FrameController.frame_changed"""
        if not self.frames:
            return
        self.set_frame(frame_index)

    def get_frame_data(self, index: int) -> Optional[FrameInfo]:
        if index < 0 or index >= len(self.frames):
            return None
        return self.frames[index]

    def get_current_frame_data(self) -> Optional[FrameInfo]:
        return self.get_frame_data(self.current_frame_index)

    def get_scaling_info(self) -> Dict[str, Any]:
        return {
            'scale_factor': self.scale_factor,
            'original_size': self.original_size.as_tuple(),
            'display_size': (
                self.original_size.w * self.scale_factor,
                self.original_size.h * self.scale_factor,
            ),
        }

    def cleanup(self):
        self.frames = ()
        self.scale_factor = 1.0
        self.original_size = Size(0, 0)
        self.current_frame_index = 0
        self.current_transform = None

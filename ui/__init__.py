"""
UI module for Sprite Atlas Viewer
Contains all Qt widgets and UI components
"""

from .log_widget import LogWidget
from .timeline import TimelineWidget
from .control_panel import ControlPanel
from .frame_info import FrameInfoPanel
from .main_window import AtlasViewerWindow

__all__ = [
    'LogWidget',
    'TimelineWidget',
    'ControlPanel',
    'FrameInfoPanel',
    'AtlasViewerWindow',
]

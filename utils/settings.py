"""
Settings Manager
Handles application settings persistence
"""

from typing import Optional

from PyQt6.QtCore import QSettings

from core.data_structures import DEFAULT_FRAME_RATE, MAX_FRAME_RATE, MIN_FRAME_RATE


class SettingsManager:
    """Manages application settings"""
    
    def __init__(self, settings: Optional[QSettings] = None):
        self.settings = settings if settings is not None else QSettings('SpriteAtlasViewer', 'Settings')
    
    def get_last_directory(self) -> str:
        """Get the directory atlases were last opened from"""
        return self.settings.value('last_directory', '', type=str)
    
    def set_last_directory(self, path: str):
        self.settings.setValue('last_directory', path)
    
    def get_frame_rate(self) -> int:
        """Saved playback rate, clamped to the supported range"""
        fps = self.settings.value('playback/frame_rate', DEFAULT_FRAME_RATE, type=int)
        return max(MIN_FRAME_RATE, min(MAX_FRAME_RATE, fps))
    
    def set_frame_rate(self, fps: int):
        self.settings.setValue('playback/frame_rate', int(fps))
    
    def get_looping(self) -> bool:
        return self.settings.value('playback/looping', True, type=bool)
    
    def set_looping(self, enabled: bool):
        self.settings.setValue('playback/looping', bool(enabled))
    
    def get_window_geometry(self):
        """Get saved window geometry"""
        return self.settings.value('window_geometry')
    
    def set_window_geometry(self, geometry):
        """Save window geometry"""
        self.settings.setValue('window_geometry', geometry)
    
    def get_window_state(self):
        """Get saved window state"""
        return self.settings.value('window_state')
    
    def set_window_state(self, state):
        """Save window state"""
        self.settings.setValue('window_state', state)

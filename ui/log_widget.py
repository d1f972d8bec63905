"""
Log Widget
Displays loader and playback messages with color-coded severity levels
"""

from datetime import datetime

from PyQt6.QtWidgets import QTextEdit


class LogWidget(QTextEdit):
    """Widget for displaying logs"""
    
    LEVEL_COLORS = {
        "INFO": "black",
        "WARNING": "orange",
        "ERROR": "red",
        "SUCCESS": "green",
    }
    
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setMaximumHeight(120)
        self.setUndoRedoEnabled(False)
    
    def log(self, message: str, level: str = "INFO"):
        """
        Add a log message
        
        Args:
            message: Message to log
            level: Severity level (INFO, WARNING, ERROR, SUCCESS)
        """
        color = self.LEVEL_COLORS.get(level, "black")
        stamp = datetime.now().strftime("%H:%M:%S")
        self.append(f'<span style="color: {color};">{stamp} [{level}] {message}</span>')
        self.verticalScrollBar().setValue(self.verticalScrollBar().maximum())

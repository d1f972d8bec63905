"""
Main Window
The main application window that ties everything together
"""

import os
from typing import List, Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QFileDialog, QMessageBox
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QShortcut, QKeySequence

from core.animation_player import FrameController
from core.data_structures import FrameInfo
from core.errors import AtlasError
from core.texture_atlas import AtlasLoader
from renderer.opengl_widget import AtlasGLWidget
from utils.settings import SettingsManager
from .log_widget import LogWidget
from .control_panel import ControlPanel
from .timeline import TimelineWidget
from .frame_info import FrameInfoPanel


IMAGE_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.webp', '.bmp', '.gif')
IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.webp *.bmp *.gif)"
MANIFEST_FILTER = "Atlas JSON (*.json)"
SKIP_STEP = 10


class AtlasViewerWindow(QMainWindow):
    """
    Sprite atlas viewer window

    Widgets only talk to the FrameController; they are updated from its
    signals and never touch the playback state directly.
    """

    def __init__(self, settings: Optional[SettingsManager] = None):
        super().__init__()
        self.setWindowTitle("Sprite Atlas Viewer")
        self.setAcceptDrops(True)

        self.settings = settings or SettingsManager()
        self.atlas_loader = AtlasLoader()
        self.frame_controller = FrameController(self.atlas_loader.get_frame_data, self)
        self._pending_image: Optional[str] = None
        self._pending_manifest: Optional[str] = None

        self.init_ui()
        self.connect_signals()
        self.setup_shortcuts()
        self.restore_settings()

    def init_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)

        self.gl_widget = AtlasGLWidget(self)
        layout.addWidget(self.gl_widget, stretch=1)

        self.frame_info = FrameInfoPanel()
        layout.addWidget(self.frame_info)

        self.timeline = TimelineWidget()
        layout.addWidget(self.timeline)

        self.control_panel = ControlPanel()
        layout.addWidget(self.control_panel)

        self.log_widget = LogWidget()
        layout.addWidget(self.log_widget)

        self.setCentralWidget(central)
        self.log_widget.log("Drop an atlas image and its JSON manifest, or use Open Atlas...")

    def connect_signals(self):
        controller = self.frame_controller
        controller.frame_changed.connect(self.gl_widget.renderer.on_frame_changed)
        controller.frame_changed.connect(self.on_frame_changed)
        controller.play_state_changed.connect(self.control_panel.update_play_state)
        controller.frame_rate_changed.connect(self.on_frame_rate_changed)
        controller.looping_changed.connect(self.on_looping_changed)
        self.gl_widget.renderer.render_error.connect(
            lambda message: self.log_widget.log(message, "ERROR")
        )

        panel = self.control_panel
        panel.open_clicked.connect(self.open_atlas_dialog)
        panel.play_toggled.connect(controller.toggle_play)
        panel.stop_clicked.connect(controller.stop)
        panel.step_backward_clicked.connect(controller.previous_frame)
        panel.step_forward_clicked.connect(controller.next_frame)
        panel.first_frame_clicked.connect(controller.go_to_first_frame)
        panel.last_frame_clicked.connect(controller.go_to_last_frame)
        panel.fps_changed.connect(controller.set_frame_rate)
        panel.loop_toggled.connect(controller.set_looping)

        self.timeline.progress_changed.connect(controller.set_frame_from_progress)
        self.timeline.scrub_started.connect(self.on_scrub_started)
        self.frame_info.frame_jump_requested.connect(controller.set_frame)

    def setup_shortcuts(self):
        controller = self.frame_controller
        bindings = [
            (Qt.Key.Key_Space, controller.toggle_play),
            (Qt.Key.Key_Left, controller.previous_frame),
            (Qt.Key.Key_Right, controller.next_frame),
            (Qt.Key.Key_Home, controller.go_to_first_frame),
            (Qt.Key.Key_End, controller.go_to_last_frame),
            (Qt.Key.Key_PageUp, lambda: controller.skip_frames(-SKIP_STEP)),
            (Qt.Key.Key_PageDown, lambda: controller.skip_frames(SKIP_STEP)),
            (Qt.Key.Key_L, lambda: controller.set_looping(not controller.is_looping)),
            (Qt.Key.Key_Escape, controller.stop),
            (Qt.Key.Key_Comma, controller.previous_frame),
            (Qt.Key.Key_Period, controller.next_frame),
            (Qt.Key.Key_Plus, lambda: controller.step_frame_rate(1)),
            (Qt.Key.Key_Equal, lambda: controller.step_frame_rate(1)),
            (Qt.Key.Key_Minus, lambda: controller.step_frame_rate(-1)),
            (Qt.Key.Key_Underscore, lambda: controller.step_frame_rate(-1)),
            (Qt.Key.Key_J, self.frame_info.prompt_for_frame_jump),
        ]
        self._shortcuts: List[QShortcut] = []
        for key, handler in bindings:
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(handler)
            self._shortcuts.append(shortcut)

    def restore_settings(self):
        geometry = self.settings.get_window_geometry()
        if geometry is not None:
            self.restoreGeometry(geometry)
        state = self.settings.get_window_state()
        if state is not None:
            self.restoreState(state)
        self.frame_controller.set_frame_rate(self.settings.get_frame_rate())
        self.frame_controller.set_looping(self.settings.get_looping())
        self.control_panel.update_looping(self.frame_controller.is_looping)

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #
    def open_atlas_dialog(self):
        start_dir = self.settings.get_last_directory()
        image_path, _ = QFileDialog.getOpenFileName(
            self, "Select Atlas Image", start_dir, IMAGE_FILTER
        )
        if not image_path:
            return
        manifest_path, _ = QFileDialog.getOpenFileName(
            self, "Select Atlas JSON", os.path.dirname(image_path), MANIFEST_FILTER
        )
        if not manifest_path:
            return
        self.load_atlas_files(image_path, manifest_path)

    def load_atlas_files(self, image_path: str, manifest_path: str) -> bool:
        """
        Replace the current atlas with a new one

        The running animation is stopped and the previous atlas released
        before loading. A failed load leaves the viewer empty.
        """
        fps = self.frame_controller.frame_rate
        self.frame_controller.cleanup()
        self.gl_widget.clear_atlas()
        self.control_panel.set_playback_enabled(False)
        self.timeline.set_frame_count(0)

        self.log_widget.log(
            f"Loading {os.path.basename(image_path)} + {os.path.basename(manifest_path)}..."
        )
        try:
            loaded = self.atlas_loader.load_atlas(image_path, manifest_path)
        except AtlasError as e:
            self.frame_controller.initialize(0)
            self.log_widget.log(f"Failed to load atlas: {e}", "ERROR")
            QMessageBox.critical(
                self, "Failed to load atlas", f"{e}\n\nNo atlas is loaded; open another image and manifest."
            )
            return False

        for warning in loaded.warnings:
            self.log_widget.log(str(warning), "WARNING")
        rotated = loaded.rotated_frame_count
        if rotated:
            self.log_widget.log(
                f"{rotated} rotated frame(s) are drawn as packed, without rotation correction",
                "WARNING",
            )

        self.settings.set_last_directory(os.path.dirname(image_path))
        self.gl_widget.set_atlas(loaded.resource, loaded.frames)
        self.timeline.set_frame_count(loaded.total_frames)
        self.frame_controller.set_frame_rate(fps)
        self.frame_controller.initialize(loaded.total_frames)
        self.control_panel.set_playback_enabled(True)

        sheet = loaded.sheet
        width, height = loaded.image_size
        self.log_widget.log(
            f"Loaded {loaded.total_frames} frames from {sheet.image} ({width}x{height}), "
            f"scale {self.gl_widget.renderer.scale_factor:.3f}",
            "SUCCESS",
        )
        return True

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event):
        for url in event.mimeData().urls():
            path = url.toLocalFile()
            if not path:
                continue
            ext = os.path.splitext(path)[1].lower()
            if ext == '.json':
                self._pending_manifest = path
            elif ext in IMAGE_EXTENSIONS:
                self._pending_image = path
            else:
                self.log_widget.log(f"Ignoring unsupported file: {os.path.basename(path)}", "WARNING")
        event.acceptProposedAction()

        if self._pending_image and self._pending_manifest:
            image_path, manifest_path = self._pending_image, self._pending_manifest
            self._pending_image = None
            self._pending_manifest = None
            self.load_atlas_files(image_path, manifest_path)
        elif self._pending_image:
            self.log_widget.log("Image received; drop the matching JSON manifest")
        elif self._pending_manifest:
            self.log_widget.log("Manifest received; drop the matching atlas image")

    # ------------------------------------------------------------------ #
    # Controller notifications
    # ------------------------------------------------------------------ #
    def on_frame_changed(self, frame_index: int, frame_data: Optional[FrameInfo]):
        total = self.frame_controller.total_frames
        self.frame_info.update_frame_info(frame_index, total, frame_data)
        self.timeline.set_current_frame(frame_index)

    def on_frame_rate_changed(self, fps: int):
        self.control_panel.update_frame_rate(fps)
        self.settings.set_frame_rate(fps)

    def on_looping_changed(self, enabled: bool):
        self.control_panel.update_looping(enabled)
        self.settings.set_looping(enabled)

    def on_scrub_started(self):
        # Scrubbing takes over the frame index
        self.frame_controller.pause()

    def closeEvent(self, event):
        """Handle window close"""
        self.settings.set_window_geometry(self.saveGeometry())
        self.settings.set_window_state(self.saveState())
        self.frame_controller.cleanup()
        self.gl_widget.clear_atlas()
        self.atlas_loader.cleanup()
        event.accept()

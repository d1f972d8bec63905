"""
OpenGL Atlas Widget
Qt widget that draws the current atlas frame as a textured quad
"""

import os
os.environ.setdefault('QT_OPENGL', 'desktop')

from typing import Optional

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QSurfaceFormat
from PyQt6.QtOpenGLWidgets import QOpenGLWidget
from OpenGL.GL import *

from core.data_structures import CanvasConfig, DEFAULT_CANVAS_CONFIG, DisplayTransform, FrameInfo
from core.image_resource import ImageResource
from core.transform import to_gl_matrix
from .sprite_renderer import SpriteRenderer


class AtlasGLWidget(QOpenGLWidget):
    """
    Rendering surface for one atlas

    The widget only consumes what the SpriteRenderer hands it: the atlas
    image, the frame to show and its display transform. Rotated frames are
    drawn exactly as packed.
    """

    texture_loaded = pyqtSignal(str)

    def __init__(self, parent: Optional[QWidget] = None, config: CanvasConfig = DEFAULT_CANVAS_CONFIG):
        super().__init__(parent)
        self.config = config
        self.renderer = SpriteRenderer(config, self)
        self.renderer.frame_applied.connect(self._on_frame_applied)

        self.texture_id: Optional[int] = None
        self._resource: Optional[ImageResource] = None
        self._texture_dirty: bool = False
        self._frame: Optional[FrameInfo] = None
        self._transform: Optional[DisplayTransform] = None

        fmt = QSurfaceFormat()
        fmt.setVersion(2, 1)
        # Compatibility profile keeps glBegin/glEnd available on macOS
        fmt.setProfile(QSurfaceFormat.OpenGLContextProfile.NoProfile)
        if config.antialias:
            fmt.setSamples(4)
        self.setFormat(fmt)
        self.setMinimumSize(config.width, config.height)

    def set_atlas(self, resource: ImageResource, frames):
        """Show a newly loaded atlas; the texture is uploaded on next paint"""
        self._resource = resource
        self._texture_dirty = True
        self._frame = None
        self._transform = None
        self.renderer.load_frames(frames)
        self.update()

    def clear_atlas(self):
        """Forget the atlas and free its texture"""
        self._release_texture()
        self._resource = None
        self._texture_dirty = False
        self._frame = None
        self._transform = None
        self.renderer.cleanup()
        self.update()

    def _on_frame_applied(self, _frame_index: int, frame: FrameInfo, transform: DisplayTransform):
        self._frame = frame
        self._transform = transform
        self.update()

    def initializeGL(self):
        """Initialize OpenGL"""
        glEnable(GL_BLEND)
        # Textures are uploaded with premultiplied alpha
        glBlendFunc(GL_ONE, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)

    def resizeGL(self, w: int, h: int):
        """Map the logical canvas onto the whole widget, Y pointing down"""
        glViewport(0, 0, w, h)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.config.width, self.config.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)

    def paintGL(self):
        """Render the current frame"""
        glClearColor(*self.config.background_color)
        glClear(GL_COLOR_BUFFER_BIT)

        if self._resource is None:
            return
        try:
            if self._texture_dirty:
                self._upload_texture()
            if self._frame is not None and self._transform is not None:
                self._draw_frame(self._frame, self._transform)
        except Exception as e:
            print(f"Error rendering frame: {e}")
            self.renderer.render_error.emit(f"Rendering error: {e}")

    def _upload_texture(self):
        self._release_texture()
        resource = self._resource
        width, height = resource.size
        pixels = resource.rgba_bytes(premultiply=True)

        self.texture_id = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, self.texture_id)
        filtering = GL_LINEAR if self.config.antialias else GL_NEAREST
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, filtering)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, filtering)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)
        glPixelStorei(GL_UNPACK_ALIGNMENT, 1)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, width, height,
                     0, GL_RGBA, GL_UNSIGNED_BYTE, pixels)
        self._texture_dirty = False
        self.texture_loaded.emit(resource.key)

    def _draw_frame(self, frame: FrameInfo, transform: DisplayTransform):
        tex_w, tex_h = self._resource.size
        rect = frame.frame
        tx1 = rect.x / tex_w
        ty1 = rect.y / tex_h
        tx2 = rect.right / tex_w
        ty2 = rect.bottom / tex_h

        # Quad centred on the origin; the model matrix scales and places it
        half_w = rect.w / 2
        half_h = rect.h / 2
        vertices = [(-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)]
        texcoords = [(tx1, ty1), (tx2, ty1), (tx2, ty2), (tx1, ty2)]

        glLoadIdentity()
        glMultMatrixf(to_gl_matrix(transform.to_matrix()))
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBindTexture(GL_TEXTURE_2D, self.texture_id)
        glBegin(GL_QUADS)
        for (u, v), (vx, vy) in zip(texcoords, vertices):
            glTexCoord2f(u, v)
            glVertex2f(vx, vy)
        glEnd()

    def _release_texture(self):
        if self.texture_id is None:
            return
        self.makeCurrent()
        try:
            glDeleteTextures([self.texture_id])
        finally:
            self.doneCurrent()
        self.texture_id = None

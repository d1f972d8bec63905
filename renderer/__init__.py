"""
Renderer module for Sprite Atlas Viewer
Handles display transforms and OpenGL drawing of atlas frames

The OpenGL widget lives in ``renderer.opengl_widget`` and is imported
directly by the UI so the adapter can be used without a GL context.
"""

from .sprite_renderer import SpriteRenderer

__all__ = [
    'SpriteRenderer',
]

"""
Data structures for Sprite Atlas Viewer
Defines the core data types used throughout the application
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .transform import create_translation_matrix, create_scale_matrix, matrix_multiply


DEFAULT_FRAME_RATE = 12
MIN_FRAME_RATE = 1
MAX_FRAME_RATE = 60


@dataclass(frozen=True)
class Size:
    """Width/height pair in pixels"""
    w: float
    h: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.w, self.h)


@dataclass(frozen=True)
class Rect:
    """Axis aligned rectangle in pixels"""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class FrameInfo:
    """
    Packing record for one sprite in the atlas sheet

    ``frame`` is the rectangle inside the sheet, ``source_size`` the
    logical (pre-trim) size and ``sprite_source_size`` where the trimmed
    pixels sit inside that logical size.
    """
    filename: str
    frame: Rect
    source_size: Size
    sprite_source_size: Optional[Rect] = None
    rotated: bool = False
    trimmed: bool = False
    anchor: Point = Point(0.5, 0.5)

    @property
    def has_trim_data(self) -> bool:
        return self.sprite_source_size is not None


@dataclass(frozen=True)
class TextureSheet:
    """One texture entry of the manifest"""
    image: str
    size: Size
    frames: Tuple[FrameInfo, ...]
    format: str = "RGBA8888"
    scale: float = 1.0


@dataclass(frozen=True)
class AtlasManifest:
    """Parsed TexturePacker manifest; only the first sheet is used"""
    textures: Tuple[TextureSheet, ...]

    @property
    def primary(self) -> TextureSheet:
        return self.textures[0]


@dataclass(frozen=True)
class DisplayTransform:
    """Uniform scale plus centre position for one displayed frame"""
    scale: float
    position: Point

    def to_matrix(self) -> np.ndarray:
        """Model matrix placing a unit-centred quad at ``position``"""
        return matrix_multiply(
            create_translation_matrix(self.position.x, self.position.y),
            create_scale_matrix(self.scale, self.scale),
        )


@dataclass
class PlaybackState:
    """Snapshot of the frame controller"""
    current_frame: int = 0
    total_frames: int = 0
    is_playing: bool = False
    frame_rate: int = DEFAULT_FRAME_RATE
    is_looping: bool = True
    progress: float = 0.0


@dataclass(frozen=True)
class CanvasConfig:
    """Fixed viewport the sprite is fitted into"""
    width: int = 800
    height: int = 600
    padding: int = 40
    background_color: Tuple[float, float, float, float] = (0.173, 0.243, 0.314, 1.0)
    antialias: bool = True

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)


DEFAULT_CANVAS_CONFIG = CanvasConfig()

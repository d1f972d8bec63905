"""
Core module for Sprite Atlas Viewer
Contains data structures, atlas loading, geometry and playback logic
"""

from .data_structures import (
    Size,
    Rect,
    Point,
    FrameInfo,
    TextureSheet,
    AtlasManifest,
    DisplayTransform,
    PlaybackState,
    CanvasConfig,
    DEFAULT_CANVAS_CONFIG,
)
from .errors import (
    AtlasError,
    FormatError,
    ImageDecodeError,
    FrameBoundsError,
    SizeMismatchWarning,
)
from .frame_sequence import FrameSequence, natural_sort_key
from .image_resource import ImageResource
from .texture_atlas import AtlasLoader, LoadedAtlas
from .geometry import (
    compute_scale_factor,
    scale_factor_for_frames,
    compute_trim_offset,
    compute_display_transform,
)
from .animation_player import FrameController, PlaybackStatus

__all__ = [
    'Size',
    'Rect',
    'Point',
    'FrameInfo',
    'TextureSheet',
    'AtlasManifest',
    'DisplayTransform',
    'PlaybackState',
    'CanvasConfig',
    'DEFAULT_CANVAS_CONFIG',
    'AtlasError',
    'FormatError',
    'ImageDecodeError',
    'FrameBoundsError',
    'SizeMismatchWarning',
    'FrameSequence',
    'natural_sort_key',
    'ImageResource',
    'AtlasLoader',
    'LoadedAtlas',
    'compute_scale_factor',
    'scale_factor_for_frames',
    'compute_trim_offset',
    'compute_display_transform',
    'FrameController',
    'PlaybackStatus',
]

"""
Display geometry
Fits atlas frames into the fixed viewport and undoes TexturePacker trimming
"""

from typing import Iterable, Optional

from .data_structures import (
    CanvasConfig,
    DEFAULT_CANVAS_CONFIG,
    DisplayTransform,
    FrameInfo,
    Point,
    Size,
)


def max_source_size(frames: Iterable[FrameInfo]) -> Size:
    """Largest logical width and height across ``frames`` (independently)"""
    max_w = 0.0
    max_h = 0.0
    for frame in frames:
        max_w = max(max_w, frame.source_size.w)
        max_h = max(max_h, frame.source_size.h)
    return Size(max_w, max_h)


def compute_scale_factor(
    max_size: Size,
    canvas_width: float = DEFAULT_CANVAS_CONFIG.width,
    canvas_height: float = DEFAULT_CANVAS_CONFIG.height,
    padding: float = DEFAULT_CANVAS_CONFIG.padding,
) -> float:
    """
    Uniform scale that fits ``max_size`` inside the padded canvas

    Never exceeds 1.0, so sprites are not enlarged past native resolution.
    An empty size (no frames) yields 1.0.
    """
    if max_size.w <= 0 or max_size.h <= 0:
        return 1.0
    available_width = canvas_width - padding
    available_height = canvas_height - padding
    scale_x = available_width / max_size.w
    scale_y = available_height / max_size.h
    return min(scale_x, scale_y, 1.0)


def scale_factor_for_frames(frames: Iterable[FrameInfo],
                            config: CanvasConfig = DEFAULT_CANVAS_CONFIG) -> float:
    """Shared scale factor for one loaded atlas"""
    return compute_scale_factor(
        max_source_size(frames), config.width, config.height, config.padding
    )


def compute_trim_offset(frame: FrameInfo) -> Point:
    """
    Offset of the trimmed rectangle's centre from the logical sprite centre

    Returns (0, 0) when the frame carries no trim data. Rotated frames get
    no axis swap here.
    """
    trim = frame.sprite_source_size
    if trim is None:
        return Point(0.0, 0.0)
    source = frame.source_size
    offset_x = trim.x + trim.w / 2 - source.w / 2
    offset_y = trim.y + trim.h / 2 - source.h / 2
    return Point(offset_x, offset_y)


def compute_display_position(frame: FrameInfo, scale_factor: float,
                             canvas_center: Point) -> Point:
    offset = compute_trim_offset(frame)
    return Point(
        canvas_center.x + offset.x * scale_factor,
        canvas_center.y + offset.y * scale_factor,
    )


def compute_display_transform(frame: FrameInfo, scale_factor: float,
                              canvas_center: Optional[Point] = None) -> DisplayTransform:
    """Scale and centre position for drawing ``frame``"""
    if canvas_center is None:
        canvas_center = DEFAULT_CANVAS_CONFIG.center
    return DisplayTransform(
        scale=scale_factor,
        position=compute_display_position(frame, scale_factor, canvas_center),
    )

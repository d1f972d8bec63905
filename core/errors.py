"""
Atlas loading errors
Failure types raised while reading a sprite atlas
"""

from typing import Optional, Tuple


class AtlasError(Exception):
    """Base class for every fatal atlas load failure"""


class FormatError(AtlasError):
    """Manifest is not valid JSON or is missing a required field"""

    def __init__(self, message: str, frame_index: Optional[int] = None):
        super().__init__(message)
        self.frame_index = frame_index


class ImageDecodeError(AtlasError):
    """Atlas image bytes could not be decoded"""


class FrameBoundsError(AtlasError):
    """A frame rectangle reaches outside the decoded atlas image"""

    def __init__(self, frame_index: int, filename: str,
                 extent: Tuple[int, int], image_size: Tuple[int, int]):
        self.frame_index = frame_index
        self.filename = filename
        self.extent = extent
        self.image_size = image_size
        super().__init__(
            f"Frame {frame_index} ({filename}) extends beyond texture bounds: "
            f"{extent[0]}x{extent[1]} > {image_size[0]}x{image_size[1]}"
        )


class SizeMismatchWarning(UserWarning):
    """Declared sheet size differs from the decoded image size (non-fatal)"""

    def __init__(self, declared: Tuple[int, int], actual: Tuple[int, int]):
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"Texture size mismatch: Expected {declared[0]}x{declared[1]}, "
            f"got {actual[0]}x{actual[1]}"
        )

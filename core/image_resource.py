"""
Image resource handle
Decoded atlas bitmap held between a successful load and cleanup
"""

import io
import itertools
from typing import Optional, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import ImageDecodeError


class ImageResource:
    """
    Owns one decoded atlas image

    Every handle that is created must be released exactly once. The class
    keeps a count of live handles so leaks can be detected.
    """

    _live_handles = 0
    _key_counter = itertools.count(1)

    def __init__(self, image: Image.Image, source_name: str = ""):
        self._image: Optional[Image.Image] = image
        self.key = f"atlas-texture-{next(self._key_counter)}"
        self.source_name = source_name
        self.size: Tuple[int, int] = (image.width, image.height)
        ImageResource._live_handles += 1

    @classmethod
    def decode(cls, data: bytes, source_name: str = "") -> "ImageResource":
        """
        Decode image bytes into a new handle

        Raises:
            ImageDecodeError: if Pillow cannot read the bytes
        """
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
            raise ImageDecodeError(f"Failed to load texture image: {exc}") from exc
        return cls(image, source_name)

    @classmethod
    def live_count(cls) -> int:
        """Number of handles allocated and not yet released"""
        return cls._live_handles

    @property
    def released(self) -> bool:
        return self._image is None

    @property
    def image(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError(f"Image resource {self.key} has been released")
        return self._image

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def rgba_bytes(self, premultiply: bool = True) -> bytes:
        """
        Raw RGBA pixels for texture upload

        With ``premultiply`` the RGB channels are multiplied by alpha, matching
        glBlendFunc(GL_ONE, GL_ONE_MINUS_SRC_ALPHA).
        """
        img = self.image.convert('RGBA')
        if not premultiply:
            return img.tobytes()
        img_data = np.array(img, dtype=np.float32) / 255.0
        alpha = img_data[:, :, 3:4]
        img_data[:, :, 0:3] *= alpha
        return (img_data * 255.0).astype(np.uint8).tobytes()

    def release(self):
        """Close the image; calling again is a no-op"""
        if self._image is None:
            return
        self._image.close()
        self._image = None
        ImageResource._live_handles -= 1

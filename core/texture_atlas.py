"""
Texture Atlas management
Loads TexturePacker JSON manifests, validates them against the decoded
sheet image and produces the ordered frame sequence
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Optional, Tuple

from utils.file_loader import ByteSource, load_json_manifest, read_source, source_name

from .data_structures import AtlasManifest, FrameInfo, Point, Rect, Size, TextureSheet
from .errors import FormatError, ImageDecodeError, FrameBoundsError, SizeMismatchWarning
from .frame_sequence import FrameSequence
from .image_resource import ImageResource


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_positive(value: Any) -> bool:
    return _is_number(value) and value > 0


@dataclass
class LoadedAtlas:
    """Result of a successful load"""
    manifest: AtlasManifest
    frames: FrameSequence
    resource: ImageResource
    warnings: List[SizeMismatchWarning] = field(default_factory=list)

    @property
    def sheet(self) -> TextureSheet:
        return self.manifest.primary

    @property
    def total_frames(self) -> int:
        return len(self.frames)

    @property
    def image_size(self) -> Tuple[int, int]:
        return self.resource.size

    @property
    def rotated_frame_count(self) -> int:
        return sum(1 for frame in self.frames if frame.rotated)


class AtlasLoader:
    """Loads a sprite atlas and owns its image resource until cleanup"""

    def __init__(self):
        self.loaded_atlas: Optional[LoadedAtlas] = None

    def load_atlas(self, image_source: ByteSource, manifest_source: ByteSource) -> LoadedAtlas:
        """
        Load and validate an atlas

        Any previously loaded atlas is released first. On failure nothing
        stays allocated and no atlas is loaded.

        Args:
            image_source: Sheet image (bytes, path or binary file object)
            manifest_source: TexturePacker JSON (bytes, path or binary file object)

        Returns:
            The loaded atlas

        Raises:
            FormatError: malformed JSON or missing/invalid fields
            ImageDecodeError: unreadable image bytes
            FrameBoundsError: a frame reaches outside the decoded image
        """
        self.cleanup()
        resource: Optional[ImageResource] = None
        try:
            manifest = self.parse_manifest(manifest_source)
            resource = self._decode_image(image_source)
            warnings = self._validate_texture_image(manifest.primary, resource)
            loaded = LoadedAtlas(
                manifest=manifest,
                frames=FrameSequence(manifest.primary.frames),
                resource=resource,
                warnings=warnings,
            )
        except Exception:
            if resource is not None:
                resource.release()
            raise
        if loaded.rotated_frame_count:
            print(f"Warning: {loaded.rotated_frame_count} rotated frame(s) will be drawn without rotation correction")
        self.loaded_atlas = loaded
        return loaded

    def parse_manifest(self, manifest_source: ByteSource) -> AtlasManifest:
        """Decode and structurally validate a manifest"""
        try:
            data = load_json_manifest(manifest_source)
        except OSError as exc:
            raise FormatError(f"Unable to read atlas file: {exc}") from exc
        except ValueError as exc:
            raise FormatError("Invalid JSON file: Unable to parse atlas data") from exc
        return self.validate_atlas_structure(data)

    def validate_atlas_structure(self, data: Any) -> AtlasManifest:
        """
        Validate decoded JSON and build the manifest

        Only the first texture is validated and kept; multi-texture atlases
        are not supported.
        """
        if not isinstance(data, dict):
            raise FormatError("Invalid atlas: Root must be an object")
        textures = data.get('textures')
        if not isinstance(textures, list):
            raise FormatError("Invalid atlas: Missing or invalid textures array")
        if not textures:
            raise FormatError("Invalid atlas: No textures found")
        sheet = self._validate_texture_structure(textures[0])
        return AtlasManifest(textures=(sheet,))

    def _validate_texture_structure(self, texture: Any) -> TextureSheet:
        if not isinstance(texture, dict):
            raise FormatError("Invalid texture: Texture must be an object")
        for required in ('image', 'size', 'frames'):
            if required not in texture:
                raise FormatError(f"Invalid texture: Missing {required} field")

        size = texture['size']
        if not isinstance(size, dict) or not _is_positive(size.get('w')) or not _is_positive(size.get('h')):
            raise FormatError("Invalid texture: Size must have numeric width and height")

        frames = texture['frames']
        if not isinstance(frames, list):
            raise FormatError("Invalid texture: Frames must be an array")
        if not frames:
            raise FormatError("Invalid texture: No frames found")

        parsed = tuple(
            self._validate_frame_structure(frame, index)
            for index, frame in enumerate(frames)
        )
        scale = texture.get('scale', 1.0)
        return TextureSheet(
            image=str(texture['image']),
            size=Size(size['w'], size['h']),
            frames=parsed,
            format=str(texture.get('format', 'RGBA8888')),
            scale=scale if _is_number(scale) else 1.0,
        )

    def _validate_frame_structure(self, frame: Any, index: int) -> FrameInfo:
        if not isinstance(frame, dict):
            raise FormatError(f"Invalid frame {index}: Frame must be an object", index)
        for required in ('filename', 'frame', 'sourceSize'):
            if required not in frame:
                raise FormatError(f"Invalid frame {index}: Missing {required} field", index)

        # x/y may be zero; w/h must be positive
        rect = frame['frame']
        if (
            not isinstance(rect, dict)
            or not _is_number(rect.get('x'))
            or not _is_number(rect.get('y'))
            or not _is_positive(rect.get('w'))
            or not _is_positive(rect.get('h'))
        ):
            raise FormatError(f"Invalid frame {index}: Frame coordinates must be numeric", index)

        source = frame['sourceSize']
        if not isinstance(source, dict) or not _is_positive(source.get('w')) or not _is_positive(source.get('h')):
            raise FormatError(f"Invalid frame {index}: Source size must have width and height", index)

        filename = frame['filename']
        if not isinstance(filename, str) or not filename.strip():
            raise FormatError(f"Invalid frame {index}: Filename must be a non-empty string", index)

        return FrameInfo(
            filename=filename,
            frame=Rect(rect['x'], rect['y'], rect['w'], rect['h']),
            source_size=Size(source['w'], source['h']),
            sprite_source_size=self._parse_sprite_source_size(frame.get('spriteSourceSize')),
            rotated=bool(frame.get('rotated', False)),
            trimmed=bool(frame.get('trimmed', False)),
            anchor=self._parse_anchor(frame.get('anchor')),
        )

    @staticmethod
    def _parse_sprite_source_size(value: Any) -> Optional[Rect]:
        if not isinstance(value, dict):
            return None
        if not all(_is_number(value.get(key)) for key in ('x', 'y', 'w', 'h')):
            return None
        return Rect(value['x'], value['y'], value['w'], value['h'])

    @staticmethod
    def _parse_anchor(value: Any) -> Point:
        if not isinstance(value, dict):
            return Point(0.5, 0.5)
        x = value.get('x', 0.5)
        y = value.get('y', 0.5)
        return Point(x if _is_number(x) else 0.5, y if _is_number(y) else 0.5)

    @staticmethod
    def _decode_image(image_source: ByteSource) -> ImageResource:
        try:
            data = read_source(image_source)
        except OSError as exc:
            raise ImageDecodeError(f"Failed to load texture image: {exc}") from exc
        return ImageResource.decode(data, source_name(image_source))

    @staticmethod
    def _validate_texture_image(sheet: TextureSheet, resource: ImageResource) -> List[SizeMismatchWarning]:
        """
        Cross-check the manifest against the decoded image

        A declared/decoded size mismatch is only a warning. Frame bounds are
        checked against the decoded size and are fatal.
        """
        warnings: List[SizeMismatchWarning] = []
        actual_w, actual_h = resource.size
        if (sheet.size.w, sheet.size.h) != (actual_w, actual_h):
            warning = SizeMismatchWarning((sheet.size.w, sheet.size.h), (actual_w, actual_h))
            print(f"Warning: {warning}")
            warnings.append(warning)

        for index, frame in enumerate(sheet.frames):
            right = frame.frame.right
            bottom = frame.frame.bottom
            if right > actual_w or bottom > actual_h:
                raise FrameBoundsError(index, frame.filename, (right, bottom), (actual_w, actual_h))
        return warnings

    def get_loaded_atlas(self) -> Optional[LoadedAtlas]:
        return self.loaded_atlas

    def get_frame_data(self, index: int) -> Optional[FrameInfo]:
        """
        Get frame information by playback index

        Returns:
            FrameInfo if an atlas is loaded and index is in range, None otherwise
        """
        if self.loaded_atlas is None:
            return None
        return self.loaded_atlas.frames.get(index)

    def get_frame_names(self) -> List[str]:
        if self.loaded_atlas is None:
            return []
        return self.loaded_atlas.frames.names()

    def find_frame_by_name(self, name: str) -> Optional[Tuple[int, FrameInfo]]:
        if self.loaded_atlas is None:
            return None
        return self.loaded_atlas.frames.find(name)

    def get_atlas_info(self) -> Optional[Dict[str, Any]]:
        if self.loaded_atlas is None:
            return None
        sheet = self.loaded_atlas.sheet
        return {
            'total_frames': self.loaded_atlas.total_frames,
            'texture_size': sheet.size.as_tuple(),
            'image_name': sheet.image,
        }

    def cleanup(self):
        """Release the loaded image resource and forget the atlas"""
        if self.loaded_atlas is not None:
            self.loaded_atlas.resource.release()
            self.loaded_atlas = None

"""
Shared fixtures: a headless Qt application and small generated atlases.
"""
import io
import json
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PIL import Image
from PyQt6.QtCore import QCoreApplication


@pytest.fixture(scope="session")
def qapp():
    """QCoreApplication needed by QTimer-driven playback."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


def make_png(width, height, color=(255, 0, 0, 255)):
    """Encode a solid RGBA PNG of the given size."""
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


def make_frame(filename, x=0, y=0, w=32, h=32, source=None, trim=None,
               rotated=False):
    """Build one TexturePacker frame record."""
    source_w, source_h = source if source else (w, h)
    record = {
        "filename": filename,
        "rotated": rotated,
        "trimmed": trim is not None,
        "sourceSize": {"w": source_w, "h": source_h},
        "frame": {"x": x, "y": y, "w": w, "h": h},
        "anchor": {"x": 0.5, "y": 0.5},
    }
    if trim is not None:
        tx, ty, tw, th = trim
        record["spriteSourceSize"] = {"x": tx, "y": ty, "w": tw, "h": th}
    return record


def make_manifest(frames, size=(128, 64), image="sheet.png"):
    """Wrap frame records in a single-texture manifest."""
    return {
        "textures": [{
            "image": image,
            "format": "RGBA8888",
            "size": {"w": size[0], "h": size[1]},
            "scale": 1,
            "frames": frames,
        }]
    }


def manifest_bytes(manifest):
    return json.dumps(manifest).encode("utf-8")


def strip_of_frames(names, frame_w=32, frame_h=32):
    """Frames laid out left to right in manifest order."""
    return [
        make_frame(name, x=index * frame_w, y=0, w=frame_w, h=frame_h)
        for index, name in enumerate(names)
    ]


@pytest.fixture
def sheet_png():
    return make_png(128, 64)


@pytest.fixture
def walk_manifest():
    names = ["walk_10.png", "walk_2.png", "walk_1.png", "walk_03.png"]
    return make_manifest(strip_of_frames(names))

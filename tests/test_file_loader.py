"""
Tests for byte source helpers.
"""
import io

import pytest

from utils.file_loader import load_json_manifest, read_source, source_name


class TestReadSource:
    """read_source accepts bytes, paths and file objects."""

    def test_bytes(self):
        assert read_source(b"abc") == b"abc"
        assert read_source(bytearray(b"abc")) == b"abc"

    def test_path(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"\x00\x01")
        assert read_source(path) == b"\x00\x01"
        assert read_source(str(path)) == b"\x00\x01"

    def test_file_object(self):
        assert read_source(io.BytesIO(b"xyz")) == b"xyz"

    def test_text_file_object(self):
        assert read_source(io.StringIO("{}")) == b"{}"

    def test_unsupported(self):
        with pytest.raises(TypeError):
            read_source(42)

    def test_source_name(self, tmp_path):
        assert source_name(tmp_path / "sheet.png") == "sheet.png"
        assert source_name(b"raw") == ""


class TestLoadJsonManifest:
    """load_json_manifest decodes UTF-8 JSON."""

    def test_valid(self):
        assert load_json_manifest(b'{"textures": []}') == {"textures": []}

    def test_byte_order_mark(self):
        assert load_json_manifest(b'\xef\xbb\xbf{"a": 1}') == {"a": 1}

    def test_invalid(self):
        with pytest.raises(ValueError):
            load_json_manifest(b"{oops")

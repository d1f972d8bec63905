"""
File Loader
Utilities for reading atlas byte sources and manifest JSON
"""

import json
import os
from typing import Any, BinaryIO, Union


ByteSource = Union[bytes, bytearray, str, os.PathLike, BinaryIO]


def read_source(source: ByteSource) -> bytes:
    """
    Read all bytes from a source
    
    Args:
        source: Raw bytes, a filesystem path or a binary file-like object
    
    Returns:
        The complete contents as bytes
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, (str, os.PathLike)):
        with open(source, 'rb') as f:
            return f.read()
    if hasattr(source, 'read'):
        data = source.read()
        if isinstance(data, str):
            return data.encode('utf-8')
        return bytes(data)
    raise TypeError(f"Unsupported byte source: {type(source).__name__}")


def source_name(source: ByteSource) -> str:
    """Best-effort display name for a source"""
    if isinstance(source, (str, os.PathLike)):
        return os.path.basename(os.fspath(source))
    name = getattr(source, 'name', None)
    if isinstance(name, str):
        return os.path.basename(name)
    return ""


def load_json_manifest(source: ByteSource) -> Any:
    """
    Decode a manifest source as JSON
    
    Raises:
        ValueError: if the bytes are not valid UTF-8 JSON
    """
    data = read_source(source)
    return json.loads(data.decode('utf-8-sig'))

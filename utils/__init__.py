"""
Utils module for Sprite Atlas Viewer
Contains helpers for reading atlas sources and persisting settings

SettingsManager lives in ``utils.settings``; it is not re-exported here
because it pulls in core, which itself reads sources through this package.
"""

from .file_loader import ByteSource, read_source, source_name, load_json_manifest

__all__ = [
    'ByteSource',
    'read_source',
    'source_name',
    'load_json_manifest',
]

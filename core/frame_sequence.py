"""
Frame sequence
Natural ordering of atlas frames; the sorted index is the playback index
"""

import re
from typing import Iterable, Iterator, List, Optional, Tuple

from .data_structures import FrameInfo, Size
from .geometry import max_source_size


_digit_run_pattern = re.compile(r'(\d+)')


def natural_sort_key(name: str) -> Tuple:
    """
    Sort key comparing digit runs by value and text runs case-insensitively

    ``re.split`` with a capturing group alternates text/digits starting with
    text, so two keys always hold the same type at the same position.
    """
    parts = _digit_run_pattern.split(name)
    key = []
    for index, part in enumerate(parts):
        if index % 2:
            key.append(int(part))
        else:
            key.append(part.casefold())
    return tuple(key)


def sort_frames(frames: Iterable[FrameInfo]) -> List[FrameInfo]:
    # Raw filename breaks ties such as "a_2" / "a_02" deterministically
    return sorted(frames, key=lambda f: (natural_sort_key(f.filename), f.filename))


class FrameSequence:
    """Ordered, read-only list of frames"""

    def __init__(self, frames: Iterable[FrameInfo]):
        self._frames: Tuple[FrameInfo, ...] = tuple(sort_frames(frames))

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[FrameInfo]:
        return iter(self._frames)

    def __getitem__(self, index: int) -> FrameInfo:
        return self._frames[index]

    def __repr__(self) -> str:
        return f"FrameSequence({len(self._frames)} frames)"

    def get(self, index: int) -> Optional[FrameInfo]:
        """Frame at ``index`` or None when out of range (no negative indexing)"""
        if index < 0 or index >= len(self._frames):
            return None
        return self._frames[index]

    def names(self) -> List[str]:
        return [frame.filename for frame in self._frames]

    def find(self, name: str) -> Optional[Tuple[int, FrameInfo]]:
        """
        Locate a frame by name

        An exact filename match wins; otherwise the first frame whose
        filename contains ``name`` is returned.
        """
        for index, frame in enumerate(self._frames):
            if frame.filename == name:
                return index, frame
        for index, frame in enumerate(self._frames):
            if name in frame.filename:
                return index, frame
        return None

    def max_source_size(self) -> Size:
        return max_source_size(self._frames)

"""
Ordered, index-addressable track collection
"""

import logging
from typing import Iterator, List, Tuple

from .models import Track

logger = logging.getLogger(__name__)


class Playlist:
    """Ordered sequence of tracks; indices stay contiguous after removal"""

    def __init__(self):
        self._tracks: List[Track] = []

    def add(self, track: Track) -> None:
        """Append a track to the end of the playlist"""
        self._tracks.append(track)
        logger.debug(f"Added track '{track}' at index {len(self._tracks) - 1}")

    def remove(self, index: int) -> None:
        """
        Remove the track at index, shifting later tracks down by one.

        Out-of-range indices are ignored.

        Args:
            index: Position of the track to remove
        """
        if 0 <= index < len(self._tracks):
            track = self._tracks.pop(index)
            logger.debug(f"Removed track '{track}' from index {index}")
        else:
            logger.debug(f"Ignoring remove of index {index} (playlist size {len(self._tracks)})")

    def clear(self) -> None:
        self._tracks.clear()

    def size(self) -> int:
        return len(self._tracks)

    def at(self, index: int) -> Track:
        """Return the track at index; raises IndexError when out of range"""
        if not 0 <= index < len(self._tracks):
            raise IndexError(f"Playlist index {index} out of range for size {len(self._tracks)}")
        return self._tracks[index]

    def all(self) -> Tuple[Track, ...]:
        """Read-only snapshot of the tracks in order"""
        return tuple(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(tuple(self._tracks))

    def __repr__(self) -> str:
        return f"Playlist(size={len(self._tracks)})"

"""
Track selection strategies and the factory that builds them
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

from .errors import EmptyPlaylistError, EmptyQueueError, QueueIndexOutOfRangeError
from .models import StrategyKind, Track, coerce_kind
from .playlist import Playlist

logger = logging.getLogger(__name__)


class SelectionStrategy(ABC):
    """Interface every selection strategy must implement."""

    kind: StrategyKind

    @abstractmethod
    def get_next(self, playlist: Playlist) -> Track: ...

    @abstractmethod
    def reset(self) -> None: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _require_tracks(playlist: Playlist) -> int:
    size = playlist.size()
    if size == 0:
        raise EmptyPlaylistError()
    return size


class SequentialStrategy(SelectionStrategy):
    """Plays the playlist in order, wrapping around at the end."""

    kind = StrategyKind.SEQUENTIAL

    def __init__(self):
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def get_next(self, playlist: Playlist) -> Track:
        size = _require_tracks(playlist)
        track = playlist.at(self._cursor % size)
        self._cursor = (self._cursor + 1) % size
        return track

    def reset(self) -> None:
        self._cursor = 0


class RandomStrategy(SelectionStrategy):
    """
    Picks a uniformly random track on every call.

    Repeats are allowed. Pass a seeded random.Random for reproducible
    selection; the default draws from a fresh, OS-seeded generator.
    """

    kind = StrategyKind.RANDOM

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()

    def get_next(self, playlist: Playlist) -> Track:
        size = _require_tracks(playlist)
        return playlist.at(self._rng.randrange(size))

    def reset(self) -> None:
        pass  # stateless


class CustomQueueStrategy(SelectionStrategy):
    """
    Plays playlist indices in a caller-supplied order.

    The queue holds playlist positions, not tracks, so it is validated
    against the playlist on every selection.
    """

    kind = StrategyKind.CUSTOM_QUEUE

    def __init__(self, indices: Optional[Sequence[int]] = None):
        self._indices: List[int] = list(indices or [])
        self._cursor = 0

    @property
    def queue(self) -> Tuple[int, ...]:
        return tuple(self._indices)

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_queue(self, indices: Sequence[int]) -> None:
        """Replace the queue and rewind to its first entry"""
        self._indices = list(indices)
        self._cursor = 0
        logger.debug(f"Custom queue set to {self._indices}")

    def get_next(self, playlist: Playlist) -> Track:
        size = _require_tracks(playlist)
        if not self._indices:
            raise EmptyQueueError()

        index = self._indices[self._cursor % len(self._indices)]
        if index < 0 or index >= size:
            raise QueueIndexOutOfRangeError(index, size)

        track = playlist.at(index)
        self._cursor = (self._cursor + 1) % len(self._indices)
        return track

    def reset(self) -> None:
        self._cursor = 0

    def __repr__(self) -> str:
        return f"CustomQueueStrategy(queue={self._indices})"


class StrategyFactory:
    """Builds selection strategies from a StrategyKind"""

    @staticmethod
    def create(kind: Any, rng: Optional[random.Random] = None) -> SelectionStrategy:
        """
        Create a new strategy instance.

        Args:
            kind: StrategyKind, or its value/name as a string
            rng: Random source handed to RandomStrategy; ignored by other kinds

        Returns:
            A fresh SelectionStrategy

        Raises:
            UnsupportedKindError: If kind is not a known strategy
        """
        strategy_kind = coerce_kind(kind, StrategyKind)

        if strategy_kind is StrategyKind.SEQUENTIAL:
            strategy = SequentialStrategy()
        elif strategy_kind is StrategyKind.RANDOM:
            strategy = RandomStrategy(rng)
        else:
            strategy = CustomQueueStrategy()

        logger.debug(f"Created strategy {strategy!r}")
        return strategy

"""
Exceptions raised by the playback core
"""


class PlaybackError(Exception):
    """Base class for all playback errors"""


class EmptyPlaylistError(PlaybackError):
    """Raised when a track is requested from an empty playlist"""

    def __init__(self, message: str = "Playlist is empty"):
        super().__init__(message)


class EmptyQueueError(PlaybackError):
    """Raised when the custom queue has no indices"""

    def __init__(self, message: str = "Custom queue is empty"):
        super().__init__(message)


class QueueIndexOutOfRangeError(PlaybackError, IndexError):
    """Raised when a custom queue entry points past the end of the playlist"""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Queue index {index} out of range for playlist of size {size}")


class UnsupportedKindError(PlaybackError, ValueError):
    """Raised when a factory is asked for a kind it does not know"""

    def __init__(self, kind, family: str):
        self.kind = kind
        self.family = family
        super().__init__(f"Unsupported {family} kind: {kind!r}")


class NotConfiguredError(PlaybackError, RuntimeError):
    """Raised when the engine is driven before playlist, strategy and device are set"""

    def __init__(self, missing=()):
        self.missing = tuple(missing)
        detail = f" (missing: {', '.join(self.missing)})" if self.missing else ""
        super().__init__(f"Playback engine not configured{detail}")


class InvalidStrategyVariantError(PlaybackError, TypeError):
    """Raised when a custom queue was requested but another strategy was built"""

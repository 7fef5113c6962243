"""
Data models for playback orchestration
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Type, TypeVar

from .errors import UnsupportedKindError


KindT = TypeVar("KindT", bound=Enum)


class DeviceKind(Enum):
    """Supported output devices"""
    BLUETOOTH = "bluetooth"
    WIRED = "wired"
    HEADPHONES = "headphones"


class StrategyKind(Enum):
    """Supported track selection strategies"""
    SEQUENTIAL = "sequential"
    RANDOM = "random"
    CUSTOM_QUEUE = "custom_queue"


class EngineState(Enum):
    """Playback engine states"""
    UNCONFIGURED = "unconfigured"
    READY = "ready"


@dataclass(frozen=True)
class Track:
    """A single playable item"""
    title: str
    artist: str

    def __str__(self) -> str:
        return f"{self.title} by {self.artist}"


@dataclass(frozen=True)
class RenderRecord:
    """Confirmation emitted by an output device after rendering a track"""
    device_kind: DeviceKind
    track: Track
    payload: str

    def __str__(self) -> str:
        return self.payload

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging"""
        return {
            "device_kind": self.device_kind.value,
            "title": self.track.title,
            "artist": self.track.artist,
            "payload": self.payload,
        }


def coerce_kind(kind: Any, kind_cls: Type[KindT]) -> KindT:
    """
    Resolve a kind tag to a member of kind_cls.

    Accepts a member of kind_cls, its value or its name (case-insensitive).

    Raises:
        UnsupportedKindError: If kind does not name a member of kind_cls
    """
    if isinstance(kind, kind_cls):
        return kind
    if isinstance(kind, str):
        normalized = kind.strip().lower()
        for member in kind_cls:
            if normalized in (member.value, member.name.lower()):
                return member
    family = kind_cls.__name__.replace("Kind", "").lower()
    raise UnsupportedKindError(kind, family)

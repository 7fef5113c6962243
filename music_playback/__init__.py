"""
Music Playback Module

Pluggable playback orchestration: pick the next track with a swappable
selection strategy and render it through a swappable output device.
"""

__version__ = "1.0.0"
__author__ = "music-playback"

from .facade import PlayerFacade
from .engine import PlaybackEngine
from .config import PlayerConfig
from .models import Track, DeviceKind, StrategyKind, EngineState, RenderRecord
from .playlist import Playlist

__all__ = [
    "PlayerFacade",
    "PlaybackEngine",
    "PlayerConfig",
    "Track",
    "DeviceKind",
    "StrategyKind",
    "EngineState",
    "RenderRecord",
    "Playlist",
]

"""
Playback engine: select the next track and render it
"""

from typing import List, Optional

from .devices import OutputDevice
from .errors import NotConfiguredError, PlaybackError
from .logging_utils import get_logger, log_error, log_render, log_state_change
from .models import EngineState, RenderRecord
from .playlist import Playlist
from .strategies import SelectionStrategy

logger = get_logger(__name__)


class PlaybackEngine:
    """Drives the select-then-render cycle over a playlist, strategy and device"""

    def __init__(self):
        self._playlist: Optional[Playlist] = None
        self._strategy: Optional[SelectionStrategy] = None
        self._device: Optional[OutputDevice] = None
        self._state = EngineState.UNCONFIGURED

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_configured(self) -> bool:
        return self._state is EngineState.READY

    @property
    def playlist(self) -> Optional[Playlist]:
        return self._playlist

    @property
    def strategy(self) -> Optional[SelectionStrategy]:
        return self._strategy

    @property
    def device(self) -> Optional[OutputDevice]:
        return self._device

    def set_playlist(self, playlist: Playlist) -> None:
        self._playlist = playlist
        self._update_state()

    def set_strategy(self, strategy: SelectionStrategy) -> None:
        """Install a strategy and rewind it"""
        self._strategy = strategy
        strategy.reset()
        self._update_state()

    def set_device(self, device: OutputDevice) -> None:
        self._device = device
        self._update_state()

    def _missing(self) -> List[str]:
        missing = []
        if self._playlist is None:
            missing.append("playlist")
        if self._strategy is None:
            missing.append("strategy")
        if self._device is None:
            missing.append("device")
        return missing

    def _update_state(self) -> None:
        new_state = EngineState.UNCONFIGURED if self._missing() else EngineState.READY
        if new_state is not self._state:
            log_state_change(logger, "PlaybackEngine", self._state, new_state)
            self._state = new_state

    def advance(self) -> RenderRecord:
        """
        Render the next track chosen by the strategy.

        Returns:
            RenderRecord produced by the device

        Raises:
            NotConfiguredError: If playlist, strategy or device is missing
            PlaybackError: Selection failures from the strategy, unchanged
        """
        if self._state is not EngineState.READY:
            raise NotConfiguredError(self._missing())

        try:
            track = self._strategy.get_next(self._playlist)
        except PlaybackError as e:
            log_error(logger, "PlaybackEngine", e, {"strategy": type(self._strategy).__name__})
            raise

        record = self._device.render(track)
        log_render(logger, record)
        return record

    def advance_many(self, count: int) -> List[RenderRecord]:
        """
        Call advance() count times, stopping at the first failure.

        Tracks rendered before a failure stay rendered.

        Args:
            count: Number of tracks to render

        Returns:
            Render records in play order
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        records = []
        for _ in range(count):
            records.append(self.advance())
        return records

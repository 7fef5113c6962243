"""
Simplified player API over playlist, factories and engine
"""

import logging
import random
from typing import Any, Dict, List, Optional, Sequence

from .config import PlayerConfig
from .devices import DeviceManager, OutputDevice
from .engine import PlaybackEngine
from .errors import InvalidStrategyVariantError
from .models import DeviceKind, RenderRecord, StrategyKind, Track, coerce_kind
from .playlist import Playlist
from .strategies import CustomQueueStrategy, SelectionStrategy, StrategyFactory

logger = logging.getLogger(__name__)


class PlayerFacade:
    """Owns the playlist and wires strategy and device into the engine"""

    def __init__(self, config: Optional[PlayerConfig] = None):
        """
        Initialize the player.

        Args:
            config: Player configuration; defaults are used when omitted
        """
        self.config = config or PlayerConfig()
        self._rng = random.Random(self.config.random_seed)
        self._playlist = Playlist()
        self._device_manager = DeviceManager()
        self._strategy: Optional[SelectionStrategy] = None
        self._engine = PlaybackEngine()

        logger.info(f"Initialized player (default device: {self.config.default_device.value}, "
                    f"default strategy: {self.config.default_strategy.value})")

    @property
    def playlist(self) -> Playlist:
        return self._playlist

    @property
    def strategy(self) -> Optional[SelectionStrategy]:
        return self._strategy

    @property
    def device(self) -> Optional[OutputDevice]:
        return self._device_manager.device

    @property
    def engine(self) -> PlaybackEngine:
        return self._engine

    def add_track(self, track: Track) -> None:
        self._playlist.add(track)

    def remove_track(self, index: int) -> None:
        self._playlist.remove(index)

    def _wire(self, device: OutputDevice, strategy: SelectionStrategy) -> None:
        self._strategy = strategy
        self._engine.set_device(device)
        self._engine.set_strategy(strategy)
        self._engine.set_playlist(self._playlist)
        logger.info(f"Configured {device.kind.value} with {strategy.kind.value} selection")

    def configure(self, device_kind: Any, strategy_kind: Any) -> None:
        """
        Replace the active device and strategy.

        Strategy cursor state is discarded. If either kind is unsupported the
        previous configuration stays in place.

        Args:
            device_kind: DeviceKind or its name
            strategy_kind: StrategyKind or its name

        Raises:
            UnsupportedKindError: If either kind is unknown
        """
        device_kind = coerce_kind(device_kind, DeviceKind)
        strategy = StrategyFactory.create(strategy_kind, rng=self._rng)
        device = self._device_manager.select_device(device_kind)
        self._wire(device, strategy)

    def configure_custom(self, device_kind: Any, indices: Sequence[int]) -> None:
        """
        Configure a custom queue of playlist indices on the given device.

        Args:
            device_kind: DeviceKind or its name
            indices: Playlist positions in the order they should play

        Raises:
            UnsupportedKindError: If device_kind is unknown
            InvalidStrategyVariantError: If the factory did not build a custom queue
        """
        device_kind = coerce_kind(device_kind, DeviceKind)
        strategy = StrategyFactory.create(StrategyKind.CUSTOM_QUEUE, rng=self._rng)
        if not isinstance(strategy, CustomQueueStrategy):
            raise InvalidStrategyVariantError(
                f"Expected CustomQueueStrategy, got {type(strategy).__name__}"
            )
        strategy.set_queue(indices)

        device = self._device_manager.select_device(device_kind)
        self._wire(device, strategy)

    def configure_from_config(self) -> None:
        """Apply the default device and strategy from the configuration"""
        self.configure(self.config.default_device, self.config.default_strategy)

    def advance(self) -> RenderRecord:
        return self._engine.advance()

    def advance_many(self, count: int) -> List[RenderRecord]:
        return self._engine.advance_many(count)

    def status(self) -> Dict[str, Any]:
        """Snapshot of the player state"""
        device = self.device
        return {
            "tracks": self._playlist.size(),
            "device": device.kind.value if device else None,
            "strategy": self._strategy.kind.value if self._strategy else None,
            "engine_state": self._engine.state.value,
        }

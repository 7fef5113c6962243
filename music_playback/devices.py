"""
Output devices for rendering tracks.

Each adapter wraps a simulated device API and exposes the common
``render(track)`` call. ``DeviceFactory`` maps a DeviceKind to the right
adapter and ``DeviceManager`` keeps the currently selected device.

Supported kinds:
  - ``bluetooth``  – Bluetooth speaker
  - ``wired``      – wired speaker
  - ``headphones`` – headphones
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from .models import DeviceKind, RenderRecord, Track, coerce_kind

logger = logging.getLogger(__name__)


class SimulatedDeviceAPI:
    """Stand-in for a vendor device API; playing only emits a log line."""

    name = "DeviceAPI"

    def __init__(self):
        self.initialized = False

    def initialize(self) -> None:
        self.initialized = True
        logger.debug(f"[{self.name}] Initialized")

    def play(self, data: str) -> str:
        logger.info(f"[{self.name}] Playing data: {data}")
        return data


class BluetoothSpeakerAPI(SimulatedDeviceAPI):
    name = "BluetoothSpeakerAPI"


class WiredSpeakerAPI(SimulatedDeviceAPI):
    name = "WiredSpeakerAPI"


class HeadphonesAPI(SimulatedDeviceAPI):
    name = "HeadphonesAPI"


class OutputDevice(ABC):
    """Interface every output device must implement."""

    kind: DeviceKind

    @abstractmethod
    def render(self, track: Track) -> RenderRecord: ...


class _ApiAdapter(OutputDevice):
    """Adapter over a simulated device API; the API is initialized once."""

    label = ""
    api_class = SimulatedDeviceAPI

    def __init__(self):
        self.api = self.api_class()
        self.api.initialize()

    def render(self, track: Track) -> RenderRecord:
        data = f"{self.label} play: {track.title} by {track.artist}"
        payload = self.api.play(data)
        return RenderRecord(device_kind=self.kind, track=track, payload=payload)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BluetoothSpeakerAdapter(_ApiAdapter):
    kind = DeviceKind.BLUETOOTH
    label = "Bluetooth"
    api_class = BluetoothSpeakerAPI


class WiredSpeakerAdapter(_ApiAdapter):
    kind = DeviceKind.WIRED
    label = "Wired"
    api_class = WiredSpeakerAPI


class HeadphonesAdapter(_ApiAdapter):
    kind = DeviceKind.HEADPHONES
    label = "Headphones"
    api_class = HeadphonesAPI


class DeviceFactory:
    """Builds output devices from a DeviceKind"""

    @staticmethod
    def create(kind: Any) -> OutputDevice:
        """
        Create a new output device.

        Args:
            kind: DeviceKind, or its value/name as a string

        Returns:
            A freshly initialized OutputDevice

        Raises:
            UnsupportedKindError: If kind is not a known device
        """
        device_kind = coerce_kind(kind, DeviceKind)

        if device_kind is DeviceKind.BLUETOOTH:
            device = BluetoothSpeakerAdapter()
        elif device_kind is DeviceKind.WIRED:
            device = WiredSpeakerAdapter()
        else:
            device = HeadphonesAdapter()

        logger.info(f"Output device: {device_kind.value}")
        return device


class DeviceManager:
    """Owns the currently selected output device"""

    def __init__(self):
        self._device: Optional[OutputDevice] = None

    @property
    def device(self) -> Optional[OutputDevice]:
        return self._device

    def select_device(self, kind: Any) -> OutputDevice:
        """Build a device for kind and make it the current one"""
        self._device = DeviceFactory.create(kind)
        return self._device

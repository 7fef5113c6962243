"""
Tests for output devices, the device factory and the device manager
"""

import pytest
from unittest.mock import patch

from music_playback.devices import (
    BluetoothSpeakerAdapter,
    DeviceFactory,
    DeviceManager,
    HeadphonesAdapter,
    WiredSpeakerAdapter,
)
from music_playback.errors import UnsupportedKindError
from music_playback.models import DeviceKind, RenderRecord, Track


class TestAdapters:
    """Test device adapters"""

    @pytest.mark.parametrize("adapter_class, label, kind", [
        (BluetoothSpeakerAdapter, "Bluetooth", DeviceKind.BLUETOOTH),
        (WiredSpeakerAdapter, "Wired", DeviceKind.WIRED),
        (HeadphonesAdapter, "Headphones", DeviceKind.HEADPHONES),
    ])
    def test_render(self, adapter_class, label, kind):
        """Each adapter renders a labelled record"""
        track = Track("Imagine", "John Lennon")

        record = adapter_class().render(track)

        assert isinstance(record, RenderRecord)
        assert record.device_kind is kind
        assert record.track == track
        assert record.payload == f"{label} play: Imagine by John Lennon"
        assert str(record) == record.payload

    def test_api_initialized_once_on_construction(self):
        device = HeadphonesAdapter()
        assert device.api.initialized is True

    def test_render_empty_strings(self):
        """Tracks with empty fields still render"""
        record = WiredSpeakerAdapter().render(Track("", ""))
        assert record.payload == "Wired play:  by "

    @patch('music_playback.devices.logger')
    def test_render_logs_payload(self, mock_logger):
        """The simulated API logs what it plays"""
        HeadphonesAdapter().render(Track("Imagine", "John Lennon"))

        mock_logger.info.assert_called_once_with(
            "[HeadphonesAPI] Playing data: Headphones play: Imagine by John Lennon"
        )

    def test_record_to_dict(self):
        record = BluetoothSpeakerAdapter().render(Track("Imagine", "John Lennon"))
        assert record.to_dict() == {
            "device_kind": "bluetooth",
            "title": "Imagine",
            "artist": "John Lennon",
            "payload": "Bluetooth play: Imagine by John Lennon",
        }


class TestDeviceFactory:
    """Test device construction"""

    @pytest.mark.parametrize("kind, expected", [
        (DeviceKind.BLUETOOTH, BluetoothSpeakerAdapter),
        (DeviceKind.WIRED, WiredSpeakerAdapter),
        (DeviceKind.HEADPHONES, HeadphonesAdapter),
        ("bluetooth", BluetoothSpeakerAdapter),
        ("Headphones", HeadphonesAdapter),
    ])
    def test_create(self, kind, expected):
        assert isinstance(DeviceFactory.create(kind), expected)

    @pytest.mark.parametrize("kind", ["airplay", "", None, 0])
    def test_unsupported_kind(self, kind):
        with pytest.raises(UnsupportedKindError) as exc_info:
            DeviceFactory.create(kind)

        assert exc_info.value.family == "device"
        assert isinstance(exc_info.value, ValueError)


class TestDeviceManager:
    """Test device selection"""

    def test_no_device_before_selection(self):
        assert DeviceManager().device is None

    def test_select_replaces_device(self):
        manager = DeviceManager()
        first = manager.select_device(DeviceKind.WIRED)
        second = manager.select_device(DeviceKind.BLUETOOTH)

        assert manager.device is second
        assert second is not first
        assert isinstance(second, BluetoothSpeakerAdapter)

    def test_failed_selection_keeps_current_device(self):
        manager = DeviceManager()
        current = manager.select_device(DeviceKind.WIRED)

        with pytest.raises(UnsupportedKindError):
            manager.select_device("airplay")

        assert manager.device is current

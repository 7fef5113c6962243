"""
Tests for tracks and playlists
"""

import dataclasses

import pytest

from music_playback.models import Track
from music_playback.playlist import Playlist


class TestTrack:
    """Test track values"""

    def test_value_equality(self):
        """Tracks with the same title and artist are equal"""
        assert Track("Imagine", "John Lennon") == Track("Imagine", "John Lennon")
        assert Track("Imagine", "John Lennon") != Track("Imagine", "Someone Else")

    def test_immutable(self):
        """Tracks cannot be modified after construction"""
        track = Track("Imagine", "John Lennon")
        with pytest.raises(dataclasses.FrozenInstanceError):
            track.title = "Other"

    def test_str(self):
        assert str(Track("Imagine", "John Lennon")) == "Imagine by John Lennon"


class TestPlaylist:
    """Test playlist editing"""

    def test_add_keeps_order_and_duplicates(self, tracks):
        """Tracks are appended in order and duplicates are allowed"""
        pl = Playlist()
        pl.add(tracks[0])
        pl.add(tracks[1])
        pl.add(tracks[0])

        assert pl.size() == 3
        assert len(pl) == 3
        assert pl.all() == (tracks[0], tracks[1], tracks[0])

    def test_remove_compacts_indices(self, playlist, tracks):
        """Removing an index shifts later tracks down by one"""
        playlist.remove(1)

        assert playlist.size() == 3
        assert playlist.at(0) == tracks[0]
        assert playlist.at(1) == tracks[2]
        assert playlist.at(2) == tracks[3]

    def test_remove_out_of_range_is_ignored(self, playlist, tracks):
        """Out-of-range removal leaves the playlist untouched"""
        playlist.remove(4)
        playlist.remove(100)
        playlist.remove(-1)

        assert playlist.all() == tuple(tracks)

    def test_remove_all_from_front(self, playlist):
        """Removing index 0 repeatedly empties the playlist"""
        for _ in range(4):
            playlist.remove(0)

        assert playlist.size() == 0
        assert playlist.all() == ()

    def test_at_out_of_range(self, playlist):
        with pytest.raises(IndexError):
            playlist.at(4)
        with pytest.raises(IndexError):
            playlist.at(-1)

    def test_all_is_snapshot(self, playlist, tracks):
        """The view returned by all() does not change with later edits"""
        view = playlist.all()
        playlist.add(Track("New", "Artist"))

        assert view == tuple(tracks)
        assert playlist.size() == 5

    def test_iteration_and_clear(self, playlist, tracks):
        assert list(playlist) == tracks

        playlist.clear()

        assert playlist.size() == 0
        assert list(playlist) == []

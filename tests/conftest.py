"""
Shared fixtures for playback tests
"""

import pytest

from music_playback.models import Track
from music_playback.playlist import Playlist


SAMPLE_TRACKS = [
    Track("Lose Yourself", "Eminem"),
    Track("Bohemian Rhapsody", "Queen"),
    Track("Blinding Lights", "The Weeknd"),
    Track("Imagine", "John Lennon"),
]


@pytest.fixture
def tracks():
    return list(SAMPLE_TRACKS)


@pytest.fixture
def playlist(tracks):
    pl = Playlist()
    for track in tracks:
        pl.add(track)
    return pl

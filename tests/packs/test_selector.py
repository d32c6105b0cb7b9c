"""Tests for sound selection."""

import random

import pytest

from peon.packs.manifest import Sound
from peon.packs.selector import pick_sound

pytestmark = pytest.mark.unit


class TestPickSound:
    """Tests for pick_sound function."""

    def test_empty_category(self):
        """Test that an empty category yields None."""
        assert pick_sound([], None, random.Random(0)) is None

    def test_single_sound_repeats(self):
        """Test that a lone sound is returned even if it just played."""
        sound = Sound(file="only.wav")
        assert pick_sound([sound], "only.wav", random.Random(0)) == sound

    def test_avoids_last_played(self):
        """Test that the last played file is never picked when alternatives exist."""
        sounds = [Sound(file="a.wav"), Sound(file="b.wav")]
        rng = random.Random(42)
        for _ in range(50):
            assert pick_sound(sounds, "a.wav", rng).file == "b.wav"

    def test_all_duplicates_fall_back(self):
        """Test that a category of identical files still returns a sound."""
        sounds = [Sound(file="a.wav", line="one"), Sound(file="a.wav", line="two")]
        assert pick_sound(sounds, "a.wav", random.Random(1)).file == "a.wav"

    def test_unknown_last_played(self):
        """Test that a stale last-played file leaves every sound eligible."""
        sounds = [Sound(file="a.wav"), Sound(file="b.wav"), Sound(file="c.wav")]
        rng = random.Random(7)
        picked = {pick_sound(sounds, "gone.wav", rng).file for _ in range(100)}
        assert picked == {"a.wav", "b.wav", "c.wav"}

    def test_deterministic_with_seed(self):
        """Test that the same seed picks the same sound."""
        sounds = [Sound(file=f"{i}.wav") for i in range(10)]
        first = pick_sound(sounds, None, random.Random(123))
        second = pick_sound(sounds, None, random.Random(123))
        assert first == second

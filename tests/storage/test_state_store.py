"""Tests for state persistence and the pause flag."""

from pathlib import Path

import pytest

from peon.sessions.state import SessionState
from peon.storage.state import is_paused, load_state, save_state, set_paused

pytestmark = pytest.mark.unit


class TestStateStore:
    """Tests for load_state and save_state."""

    def test_missing_file(self, temp_dir: Path):
        """Test that a missing state file loads as empty state."""
        assert load_state(temp_dir / ".state.json") == SessionState()

    def test_malformed_file(self, temp_dir: Path):
        """Test that a corrupt state file loads as empty state."""
        path = temp_dir / ".state.json"
        path.write_text("{not json")
        assert load_state(path) == SessionState()

    def test_non_utf8_file(self, temp_dir: Path):
        """Test that a state file with invalid UTF-8 loads as empty state."""
        path = temp_dir / ".state.json"
        path.write_bytes(b'{"last_played": {"a": "\xff\xfe"}}')
        assert load_state(path) == SessionState()

    def test_save_and_load(self, temp_dir: Path):
        """Test that saved state loads back unchanged."""
        path = temp_dir / "nested" / ".state.json"
        state = SessionState(
            last_played={"complete": "Done.wav"},
            agent_sessions={"agent-1"},
            prompt_timestamps={"s1": [10.0]},
            session_packs={"s1": "peon"},
        )
        save_state(path, state)
        assert load_state(path) == state

    def test_no_temp_files_left(self, temp_dir: Path):
        """Test that the atomic write leaves only the target file."""
        path = temp_dir / ".state.json"
        save_state(path, SessionState())
        save_state(path, SessionState(last_played={"a": "b.wav"}))
        assert [p.name for p in temp_dir.iterdir()] == [".state.json"]


class TestPauseFlag:
    """Tests for is_paused and set_paused."""

    def test_toggle(self, temp_dir: Path):
        """Test creating and removing the pause flag."""
        path = temp_dir / "home" / ".paused"
        assert is_paused(path) is False

        set_paused(path, True)
        assert is_paused(path) is True

        set_paused(path, False)
        assert is_paused(path) is False

    def test_resume_when_not_paused(self, temp_dir: Path):
        """Test that resuming twice is harmless."""
        set_paused(temp_dir / ".paused", False)
        assert is_paused(temp_dir / ".paused") is False

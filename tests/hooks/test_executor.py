"""Tests for ActionExecutor."""

import io
import random
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from peon.hooks.actions import Notify, NotifyColor, PlaySound, SetTabTitle, Skip
from peon.hooks.executor import ActionExecutor
from peon.packs.manifest import Category, Manifest, Sound
from peon.sessions.state import SessionState

pytestmark = pytest.mark.unit


@pytest.fixture
def pack_dir(temp_dir: Path) -> Path:
    sounds = temp_dir / "peon" / "sounds"
    sounds.mkdir(parents=True)
    for name in ("Ready.wav", "Done1.wav", "Done2.wav"):
        (sounds / name).write_bytes(b"RIFF")
    return temp_dir / "peon"


@pytest.fixture
def manifest() -> Manifest:
    return Manifest(
        name="peon",
        categories={
            "greeting": Category(sounds=[Sound(file="Ready.wav", line="Ready to work?")]),
            "complete": Category(sounds=[Sound(file="Done1.wav"), Sound(file="Done2.wav")]),
            "error": Category(sounds=[Sound(file="Missing.wav")]),
        },
    )


def make_executor(pack_dir, manifest, paused=False, focused=False):
    stream = io.StringIO()
    player = MagicMock(return_value=1234)
    notifier = MagicMock(return_value=True)
    executor = ActionExecutor(
        pack_dir=pack_dir,
        manifest=manifest,
        volume=0.7,
        paused=paused,
        rng=random.Random(0),
        stream=stream,
        player=player,
        notifier=notifier,
        is_terminal_focused=lambda: focused,
    )
    return executor, stream, player, notifier


class TestActionExecutor:
    """Tests for ActionExecutor.execute."""

    def test_set_tab_title(self, pack_dir, manifest):
        """Test that the title escape is written to the stream."""
        executor, stream, _, _ = make_executor(pack_dir, manifest)
        dirty = executor.execute([SetTabTitle(title="app: ready")], SessionState())
        assert stream.getvalue() == "\x1b]0;app: ready\x07"
        assert dirty is False

    def test_play_sound(self, pack_dir, manifest):
        """Test that a sound is played and recorded as last played."""
        executor, _, player, _ = make_executor(pack_dir, manifest)
        state = SessionState()

        dirty = executor.execute([PlaySound(category="greeting")], state)

        assert dirty is True
        player.assert_called_once_with(pack_dir / "sounds" / "Ready.wav", 0.7)
        assert state.last_played == {"greeting": "Ready.wav"}

    def test_play_avoids_last_played(self, pack_dir, manifest):
        """Test that the previous sound of a category is not repeated."""
        executor, _, player, _ = make_executor(pack_dir, manifest)
        state = SessionState(last_played={"complete": "Done1.wav"})

        executor.execute([PlaySound(category="complete")], state)

        player.assert_called_once_with(pack_dir / "sounds" / "Done2.wav", 0.7)
        assert state.last_played["complete"] == "Done2.wav"

    def test_missing_category_ignored(self, pack_dir, manifest):
        """Test that a category absent from the pack plays nothing."""
        executor, _, player, _ = make_executor(pack_dir, manifest)
        state = SessionState()
        assert executor.execute([PlaySound(category="annoyed")], state) is False
        player.assert_not_called()
        assert state.last_played == {}

    def test_missing_sound_file_not_played(self, pack_dir, manifest):
        """Test that a manifest entry without a file on disk is not spawned."""
        executor, _, player, _ = make_executor(pack_dir, manifest)
        state = SessionState()
        executor.execute([PlaySound(category="error")], state)
        player.assert_not_called()
        assert state.last_played == {"error": "Missing.wav"}

    def test_player_failure_logged(self, pack_dir, manifest):
        """Test that a spawn failure does not propagate."""
        executor, _, player, _ = make_executor(pack_dir, manifest)
        player.side_effect = OSError("no player")
        assert executor.execute([PlaySound(category="greeting")], SessionState()) is True

    def test_no_manifest(self, pack_dir):
        """Test that nothing plays when the pack is not installed."""
        executor, _, player, _ = make_executor(pack_dir, None)
        assert executor.execute([PlaySound(category="greeting")], SessionState()) is False
        player.assert_not_called()

    def test_notify(self, pack_dir, manifest):
        """Test that notifications are forwarded to the notifier."""
        executor, _, _, notifier = make_executor(pack_dir, manifest)
        executor.execute(
            [Notify(message="app  —  Task complete", title="● app: done", color=NotifyColor.BLUE)],
            SessionState(),
        )
        notifier.assert_called_once_with("app  —  Task complete", "● app: done", NotifyColor.BLUE)

    def test_notify_skipped_when_focused(self, pack_dir, manifest):
        """Test that a focused terminal suppresses notifications."""
        executor, _, _, notifier = make_executor(pack_dir, manifest, focused=True)
        executor.execute([Notify(message="m", title="t", color=NotifyColor.RED)], SessionState())
        notifier.assert_not_called()

    def test_paused_keeps_title_only(self, pack_dir, manifest):
        """Test that pausing mutes sounds and notifications but not titles."""
        executor, stream, player, notifier = make_executor(pack_dir, manifest, paused=True)
        state = SessionState()
        dirty = executor.execute(
            [
                SetTabTitle(title="● app: done"),
                PlaySound(category="complete"),
                Notify(message="m", title="t", color=NotifyColor.BLUE),
            ],
            state,
        )
        assert stream.getvalue() == "\x1b]0;● app: done\x07"
        player.assert_not_called()
        notifier.assert_not_called()
        assert dirty is False
        assert state.last_played == {}

    def test_skip_does_nothing(self, pack_dir, manifest):
        """Test that Skip produces no side effects."""
        executor, stream, player, notifier = make_executor(pack_dir, manifest)
        assert executor.execute([Skip()], SessionState()) is False
        assert stream.getvalue() == ""
        player.assert_not_called()
        notifier.assert_not_called()

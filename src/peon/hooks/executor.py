"""
Action execution.

ActionExecutor turns routed actions into side effects: a title escape on
stdout, a detached audio player, a desktop notification. Every side effect
is fire-and-forget; failures are logged and never raised.
"""

from __future__ import annotations

import logging
import random
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from peon.hooks.actions import Action, Notify, PlaySound, SetTabTitle
from peon.hooks.tab_title import tab_title_escape
from peon.packs.manifest import Manifest
from peon.packs.selector import pick_sound
from peon.platform.audio import play_sound
from peon.platform.notification import send_notification
from peon.sessions.state import SessionState

logger = logging.getLogger(__name__)

SOUNDS_DIRNAME = "sounds"


def terminal_never_focused() -> bool:
    """Default focus probe: always notify."""
    return False


class ActionExecutor:
    """Carry out routed actions for one hook invocation.

    Attributes:
        pack_dir: Directory of the resolved pack (sounds live in ``sounds/``)
        manifest: Manifest of the resolved pack, None if it is not installed
        volume: Playback volume
        paused: When True, nothing is played or notified (titles still update)
    """

    def __init__(
        self,
        pack_dir: Path,
        manifest: Manifest | None,
        volume: float,
        paused: bool,
        rng: random.Random,
        stream: TextIO | None = None,
        player: Callable[[Path, float], int | None] = play_sound,
        notifier: Callable[..., bool] = send_notification,
        is_terminal_focused: Callable[[], bool] = terminal_never_focused,
    ):
        self.pack_dir = pack_dir
        self.manifest = manifest
        self.volume = volume
        self.paused = paused
        self._rng = rng
        self._stream = stream
        self._player = player
        self._notifier = notifier
        self._is_terminal_focused = is_terminal_focused

    def execute(self, actions: Sequence[Action], state: SessionState) -> bool:
        """Execute actions in order.

        Args:
            actions: Routed actions
            state: Session state; ``last_played`` is updated for played sounds

        Returns:
            True if ``state`` was modified
        """
        dirty = False
        for action in actions:
            if isinstance(action, SetTabTitle):
                self._set_tab_title(action)
            elif isinstance(action, PlaySound):
                dirty = self._play(action, state) or dirty
            elif isinstance(action, Notify):
                self._notify(action)
        return dirty

    def _set_tab_title(self, action: SetTabTitle) -> None:
        stream = self._stream or sys.stdout
        try:
            stream.write(tab_title_escape(action.title))
            stream.flush()
        except OSError as e:
            logger.debug(f"Could not write tab title: {e}")

    def _play(self, action: PlaySound, state: SessionState) -> bool:
        if self.paused or self.manifest is None:
            return False

        category = self.manifest.categories.get(action.category)
        if category is None:
            logger.debug(f"Pack {self.manifest.name} has no '{action.category}' category")
            return False

        sound = pick_sound(category.sounds, state.last_played.get(action.category), self._rng)
        if sound is None:
            return False

        state.last_played[action.category] = sound.file

        sound_path = self.pack_dir / SOUNDS_DIRNAME / sound.file
        if not sound_path.exists():
            logger.warning(f"Sound file missing: {sound_path}")
            return True

        try:
            self._player(sound_path, self.volume)
            logger.debug(f"Playing {action.category}: {sound.file}")
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"Failed to play {sound_path}: {e}")
        return True

    def _notify(self, action: Notify) -> None:
        if self.paused:
            return
        if self._is_terminal_focused():
            return
        try:
            self._notifier(action.message, action.title, action.color)
        except OSError as e:
            logger.warning(f"Failed to send notification '{action.title}': {e}")

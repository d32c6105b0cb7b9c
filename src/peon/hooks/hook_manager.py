"""
Hook Manager - coordinator for one Claude Code hook invocation.

Each hook event runs as its own short-lived process:

1. decode the event from stdin
2. load config, state, the pause flag and the installed packs once
3. plan: agent gate, annoyed tracking, routing, pack resolution
4. execute the actions (title, sound, notification)
5. save state once, and only if something changed

Example:
    ```python
    from peon.hooks.hook_manager import HookManager

    manager = HookManager()
    manager.execute('{"hook_event_name": "Stop", "cwd": "/work/app"}')
    ```

Overlapping invocations do read-modify-write on the same state file
without a lock. Saves are atomic, so a reader never sees a torn file, but
two near-simultaneous events can drop one of their updates.
"""

from __future__ import annotations

import logging
import random
import sys
import time
from collections.abc import Callable, Collection
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

from peon.config.app import PeonConfig, read_config
from peon.hooks.actions import Action, PlaySound
from peon.hooks.events import HookEvent, SessionStart, UserPromptSubmit, parse_hook_event
from peon.hooks.executor import ActionExecutor, terminal_never_focused
from peon.hooks.routing import route_event
from peon.packs.resolver import resolve_pack
from peon.platform.audio import play_sound
from peon.platform.notification import send_notification
from peon.sessions.agent import DELEGATE_MODE, is_agent_session
from peon.sessions.annoyed import check_annoyed, record_prompt
from peon.sessions.state import SessionState
from peon.storage.packs import list_packs, pack_names
from peon.storage.state import is_paused, load_state, save_state
from peon.utils.paths import (
    CONFIG_FILENAME,
    LOGS_DIRNAME,
    PACKS_DIRNAME,
    PAUSED_FILENAME,
    STATE_FILENAME,
    get_peon_home,
)

PAUSED_NOTICE = "peon-ping: sounds paused — run 'peon resume' or '/peon-ping-toggle' to unpause"


@dataclass
class HookPlan:
    """Outcome of planning one event against config and state."""

    actions: list[Action] = field(default_factory=list)
    pack: str | None = None
    suppressed: bool = False
    dirty: bool = False


def plan_hook(
    event: HookEvent,
    config: PeonConfig,
    state: SessionState,
    available_packs: Collection[str],
    rng: random.Random,
    now: float,
) -> HookPlan:
    """Decide what to do for an event, updating ``state`` in memory.

    Agent sessions are suppressed entirely (a newly seen delegate session is
    recorded). Prompt submissions feed the annoyed window and may append an
    ``annoyed`` sound after the routed actions. Under pack rotation the
    resolved pack is pinned to the session.

    Args:
        event: Decoded hook event
        config: Loaded configuration
        state: Loaded session state, mutated in place
        available_packs: Names of installed packs
        rng: Random source for pack rotation
        now: Current unix time

    Returns:
        HookPlan with the actions, the resolved pack and the dirty flag
    """
    session_id = event.session_id

    if is_agent_session(state.agent_sessions, session_id, event.permission_mode):
        newly_seen = (
            event.permission_mode == DELEGATE_MODE and session_id not in state.agent_sessions
        )
        if newly_seen:
            state.agent_sessions.add(session_id)
        return HookPlan(suppressed=True, dirty=newly_seen)

    plan = HookPlan()

    annoyed = False
    if (
        config.enabled
        and isinstance(event, UserPromptSubmit)
        and config.categories.is_enabled("annoyed")
    ):
        window = config.annoyed_window_seconds
        timestamps = record_prompt(state.prompt_timestamps.get(session_id, []), now, window)
        state.prompt_timestamps[session_id] = timestamps
        plan.dirty = True
        annoyed = check_annoyed(timestamps, config.annoyed_threshold, window, now)

    plan.actions = route_event(event, config, state)
    if annoyed:
        plan.actions.append(PlaySound(category="annoyed"))

    plan.pack = resolve_pack(config, state.session_packs, session_id, available_packs, rng)
    if config.pack_rotation and state.session_packs.get(session_id) != plan.pack:
        state.session_packs[session_id] = plan.pack
        plan.dirty = True

    return plan


class HookManager:
    """
    Coordinator for a single hook invocation.

    Owns the load/save lifecycle of config and state; everything in between
    is delegated to plan_hook() and ActionExecutor.

    Attributes:
        peon_home: Base data directory
        packs_dir: Directory holding installed packs
        config: Loaded PeonConfig
        logger: Configured logger instance
    """

    def __init__(
        self,
        peon_home: str | Path | None = None,
        packs_dir: str | Path | None = None,
        config: PeonConfig | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        player: Callable[[Path, float], int | None] | None = None,
        notifier: Callable[..., bool] | None = None,
        is_terminal_focused: Callable[[], bool] = terminal_never_focused,
    ):
        """
        Initialize HookManager.

        Args:
            peon_home: Base data directory (default: CLAUDE_PEON_DIR or
                ~/.claude/hooks/peon-ping)
            packs_dir: Packs directory override (default: <peon_home>/packs)
            config: Preloaded config (default: loaded from <peon_home>/config.json)
            rng: Random source for pack rotation and sound selection
            clock: Returns the current unix time
            stdout: Stream for the tab title escape (default: sys.stdout)
            stderr: Stream for user notices (default: sys.stderr)
            player: Audio player collaborator (default: play_sound)
            notifier: Desktop notification collaborator (default: send_notification)
            is_terminal_focused: Focus probe; notifications are skipped when True
        """
        self.peon_home = Path(peon_home) if peon_home else get_peon_home()
        self.config_path = self.peon_home / CONFIG_FILENAME
        self.state_path = self.peon_home / STATE_FILENAME
        self.paused_path = self.peon_home / PAUSED_FILENAME
        self.packs_dir = Path(packs_dir) if packs_dir else self.peon_home / PACKS_DIRNAME

        config_problem = None
        if config is None:
            config, config_problem = read_config(self.config_path)
        self.config = config
        self.logger = self._setup_logging()
        if config_problem:
            self.logger.warning(f"Using default config, {config_problem}")

        self._rng = rng or random.Random()
        self._clock = clock
        self._stdout = stdout
        self._stderr = stderr
        self._player = player or play_sound
        self._notifier = notifier or send_notification
        self._is_terminal_focused = is_terminal_focused

    def _setup_logging(self) -> logging.Logger:
        """
        Attach a rotating file handler to the ``peon`` logger.

        Returns:
            Configured logger instance
        """
        logger = logging.getLogger("peon")
        logger.setLevel(logging.DEBUG)

        # Avoid duplicate handlers if logger already configured
        if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            return logger

        settings = self.config.logging
        log_file_path = (
            Path(settings.file).expanduser()
            if settings.file
            else self.peon_home / LOGS_DIRNAME / "peon.log"
        )
        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file_path,
                maxBytes=settings.max_size_mb * 1024 * 1024,
                backupCount=settings.backup_count,
            )
        except OSError as e:
            logger.debug(f"File logging disabled, cannot open {log_file_path}: {e}")
            return logger

        file_handler.setLevel(settings.level.upper())
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        return logger

    def execute(self, raw_input: str) -> list[Action]:
        """
        Handle a raw hook payload as read from stdin.

        Args:
            raw_input: JSON text; blank input is ignored

        Returns:
            The actions that were planned (empty for blank input or agents)

        Raises:
            HookEventParseError: If the payload cannot be decoded
        """
        if not raw_input.strip():
            return []
        return self.handle(parse_hook_event(raw_input))

    def handle(self, event: HookEvent) -> list[Action]:
        """
        Handle a decoded hook event end to end.

        Args:
            event: Decoded hook event

        Returns:
            The actions that were planned (empty for agent sessions)
        """
        self.logger.debug(
            f"[{event.hook_event_name}] session_id={event.session_id}, "
            f"permission_mode={event.permission_mode}, cwd={event.cwd}"
        )

        state = load_state(self.state_path)
        paused = is_paused(self.paused_path)
        packs = list_packs(self.packs_dir)

        plan = plan_hook(
            event,
            self.config,
            state,
            pack_names(packs),
            self._rng,
            self._clock(),
        )

        if plan.suppressed:
            self.logger.info(f"Suppressing feedback for agent session {event.session_id}")
        else:
            pack = plan.pack or self.config.active_pack
            manifest = next((m for name, m in packs if name == pack), None)
            if manifest is None:
                self.logger.warning(f"Pack '{pack}' is not installed in {self.packs_dir}")

            executor = ActionExecutor(
                pack_dir=self.packs_dir / pack,
                manifest=manifest,
                volume=self.config.volume,
                paused=paused,
                rng=self._rng,
                stream=self._stdout,
                player=self._player,
                notifier=self._notifier,
                is_terminal_focused=self._is_terminal_focused,
            )
            if executor.execute(plan.actions, state):
                plan.dirty = True

            if isinstance(event, SessionStart) and paused:
                stderr = self._stderr or sys.stderr
                stderr.write(PAUSED_NOTICE + "\n")

        if plan.dirty:
            self._save_state(state)

        return plan.actions

    def _save_state(self, state: SessionState) -> None:
        try:
            save_state(self.state_path, state)
        except OSError as e:
            self.logger.warning(f"Failed to save state to {self.state_path}: {e}")

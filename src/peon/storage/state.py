"""
Session state persistence.

State files are small JSON documents rewritten whole. Reads never fail:
a missing, unreadable or malformed file yields an empty SessionState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from peon.sessions.state import SessionState
from peon.utils.atomic import atomic_write_text

logger = logging.getLogger(__name__)


def load_state(path: Path) -> SessionState:
    """Load state from disk, returning an empty state on any problem."""
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return SessionState()
    except OSError as e:
        logger.warning(f"Could not read state file {path}: {e}")
        return SessionState()
    except UnicodeDecodeError as e:
        logger.warning(f"Discarding undecodable state file {path}: {e}")
        return SessionState()

    try:
        return SessionState.model_validate_json(content)
    except ValidationError as e:
        logger.warning(f"Discarding malformed state file {path}: {e}")
        return SessionState()


def save_state(path: Path, state: SessionState) -> None:
    """Write state to disk atomically.

    Raises:
        OSError: If the file cannot be written
    """
    atomic_write_text(path, state.model_dump_json())


def is_paused(path: Path) -> bool:
    """Sounds and notifications are paused while the flag file exists."""
    return path.exists()


def set_paused(path: Path, paused: bool) -> None:
    """Create or remove the pause flag file.

    Raises:
        OSError: If the flag file cannot be created or removed
    """
    if paused:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    else:
        path.unlink(missing_ok=True)

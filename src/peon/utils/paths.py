"""
Filesystem locations used by peon-ping.

Everything lives under one base directory so tests (and users who keep
several installs) can point ``CLAUDE_PEON_DIR`` somewhere else.
"""

import os
from pathlib import Path

CONFIG_FILENAME = "config.json"
STATE_FILENAME = ".state.json"
PAUSED_FILENAME = ".paused"
PACKS_DIRNAME = "packs"
LOGS_DIRNAME = "logs"


def get_peon_home() -> Path:
    """Get the peon-ping data directory, respecting CLAUDE_PEON_DIR env var.

    Returns:
        Path to the data directory (~/.claude/hooks/peon-ping by default)
    """
    peon_home = os.environ.get("CLAUDE_PEON_DIR")
    if peon_home:
        return Path(peon_home)
    return Path.home() / ".claude" / "hooks" / "peon-ping"


def config_path() -> Path:
    return get_peon_home() / CONFIG_FILENAME


def paused_path() -> Path:
    return get_peon_home() / PAUSED_FILENAME


def packs_dir(override: str | Path | None = None) -> Path:
    """Get the sound packs directory.

    Args:
        override: Explicit directory (from ``--packs-dir``); wins over the default

    Returns:
        Path to the directory holding one sub-directory per pack
    """
    if override:
        return Path(override).expanduser()
    return get_peon_home() / PACKS_DIRNAME

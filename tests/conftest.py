"""Pytest configuration and shared fixtures for peon-ping tests."""

import json
import logging
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def peon_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point CLAUDE_PEON_DIR at an empty temporary data directory."""
    home = temp_dir / "peon-ping"
    home.mkdir()
    monkeypatch.setenv("CLAUDE_PEON_DIR", str(home))
    return home


@pytest.fixture
def make_pack(peon_home: Path) -> Callable[..., Path]:
    """Factory that installs a pack under <peon_home>/packs.

    Categories map to lists of (file, line) pairs; every sound file is
    created unless ``with_files`` is False.
    """

    def _make_pack(
        name: str,
        categories: dict[str, list[tuple[str, str]]],
        display_name: str = "",
        with_files: bool = True,
    ) -> Path:
        pack_dir = peon_home / "packs" / name
        sounds_dir = pack_dir / "sounds"
        sounds_dir.mkdir(parents=True)

        manifest = {
            "name": name,
            "display_name": display_name,
            "categories": {
                category: {"sounds": [{"file": f, "line": line} for f, line in sounds]}
                for category, sounds in categories.items()
            },
        }
        (pack_dir / "manifest.json").write_text(json.dumps(manifest))

        if with_files:
            for sounds in categories.values():
                for file, _ in sounds:
                    (sounds_dir / file).write_bytes(b"RIFF")
        return pack_dir

    return _make_pack


@pytest.fixture(autouse=True)
def reset_peon_logger() -> Iterator[None]:
    """Detach file handlers HookManager adds to the ``peon`` logger."""
    yield
    logger = logging.getLogger("peon")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

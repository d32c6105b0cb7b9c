"""
Sound pack manifest models.

A pack directory holds ``manifest.json`` and a ``sounds/`` folder:

    {
        "name": "peon",
        "display_name": "Orc Peon",
        "categories": {
            "greeting": {"sounds": [{"file": "PeonReady1.wav", "line": "Ready to work?"}]}
        }
    }

Manifests are read-only once loaded.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Sound(BaseModel):
    """One voice line and the file that plays it."""

    file: str
    line: str = ""


class Category(BaseModel):
    """Interchangeable lines for one semantic bucket (greeting, complete, ...)."""

    sounds: list[Sound] = Field(default_factory=list)


class Manifest(BaseModel):
    """A sound pack descriptor."""

    name: str
    display_name: str = ""
    categories: dict[str, Category] = Field(default_factory=dict)

    @property
    def label(self) -> str:
        """Human-readable pack name, falling back to the id."""
        return self.display_name or self.name


def format_pack_sounds(manifest: Manifest) -> str:
    """Format a manifest's categories and voice lines for display.

    Categories are listed alphabetically, each with its sound count and
    quoted lines.

    Args:
        manifest: Pack manifest to describe

    Returns:
        Multi-line text ending with a newline
    """
    out = f"{manifest.label} ({manifest.name})\n"

    if not manifest.categories:
        out += "\n  No categories.\n"
        return out

    for name in sorted(manifest.categories):
        sounds = manifest.categories[name].sounds
        label = "sound" if len(sounds) == 1 else "sounds"
        out += f"\n  {name} ({len(sounds)} {label})\n"
        for sound in sounds:
            out += f'    "{sound.line}"\n'

    return out

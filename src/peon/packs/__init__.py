"""
Sound packs: manifests, per-session pack resolution and sound selection.
"""

from peon.packs.manifest import Category, Manifest, Sound, format_pack_sounds
from peon.packs.resolver import resolve_pack
from peon.packs.selector import pick_sound

__all__ = [
    "Category",
    "Manifest",
    "Sound",
    "format_pack_sounds",
    "pick_sound",
    "resolve_pack",
]

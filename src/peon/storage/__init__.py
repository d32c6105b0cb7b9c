"""
On-disk storage for session state and sound packs.

- state.py: load/save SessionState and the pause flag
- packs.py: manifest loading and pack discovery
"""

from peon.storage.packs import list_packs, load_manifest, pack_names
from peon.storage.state import is_paused, load_state, save_state, set_paused

__all__ = [
    "is_paused",
    "list_packs",
    "load_manifest",
    "load_state",
    "pack_names",
    "save_state",
    "set_paused",
]

"""The static mod registry.

The bundled `data/modinfo.json` is loaded exactly once, when this module is
first imported, and exposed as an immutable tuple of `ModInfo`. The load is
unchecked (see `modlist.io.modinfo`). A missing or malformed resource raises
`ResourceLoadFailure` out of the import.
"""

from __future__ import annotations

from modlist.core.model import ModInfo
from modlist.io.modinfo import load_bundled_modinfo

mods: tuple[ModInfo, ...] = load_bundled_modinfo()


def get_mods() -> tuple[ModInfo, ...]:
    """Return the bundled registry (the same object on every call)."""
    return mods


__all__ = ["get_mods", "mods"]

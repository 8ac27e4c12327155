"""modlist I/O helpers.

Reading and writing modinfo JSON lives in [`modinfo`](modinfo.py:1).
"""

from __future__ import annotations

from .modinfo import (
    ResourceLoadFailure,
    load_bundled_modinfo,
    read_modinfo_json,
    write_modinfo_json,
)

__all__ = [
    "ResourceLoadFailure",
    "load_bundled_modinfo",
    "read_modinfo_json",
    "write_modinfo_json",
]

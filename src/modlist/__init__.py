"""modlist: a static, typed registry of mod metadata.

The registry itself lives in `modlist.registry` and is loaded on first import
of that module, not of this package.
"""

from __future__ import annotations

from modlist.core import ModInfo, ModStatus, SchemaViolation
from modlist.io import ResourceLoadFailure, read_modinfo_json

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ModInfo",
    "ModStatus",
    "ResourceLoadFailure",
    "SchemaViolation",
    "read_modinfo_json",
]

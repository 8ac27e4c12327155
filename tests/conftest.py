"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import modlist` to fail.

We ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers
# =============================================================================


def write_json(path: Path, obj: Any) -> Path:
    """Write `obj` as JSON to `path` and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2) + "\n", encoding="utf-8")
    return path


def make_record(name: str = "ExampleMod", status: str = "allowed", **extra: Any) -> dict[str, Any]:
    """Create a raw modinfo JSON object."""
    obj: dict[str, Any] = {"name": name, "status": status}
    obj.update(extra)
    return obj

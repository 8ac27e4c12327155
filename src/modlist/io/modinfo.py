"""modinfo JSON I/O.

This module provides:
- a reader for modinfo JSON files (`read_modinfo_json`) and for the copy
  bundled with the package (`load_bundled_modinfo`)
- a writer (`write_modinfo_json`) that preserves record and key order

Schema (a JSON array; one object per mod):
[
  {
    "name": "Sodium",
    "modrinth": "sodium",
    "status": "allowed",
    "server": ["Alpha", "Beta"]    # optional
  },
  ...
]

Load policy:
- Default (`validate=False`) is unchecked. Records are relabelled as `ModInfo`
  without checking their shape; a status outside the four known values or a
  missing name is kept raw and only surfaces when a consumer reads the field.
  An explicit `null` in an optional field reads back as `None`, the same as an
  omitted key, so writing the records again drops it.
- `validate=True` runs `modlist.core.validate.validate_modinfo_records` once
  the raw-data checks below pass, and raises `SchemaViolation` on any mismatch.

Raw-data failures (missing or unreadable file, invalid JSON, top-level value
that is not an array, entries that are not objects) raise `ResourceLoadFailure`
in both modes.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Iterable

from modlist.core.model import MODINFO_FIELDS, OPTIONAL_TEXT_FIELDS, ModInfo, ModStatus
from modlist.core.validate import check_modinfo_record, validate_modinfo_records

logger = logging.getLogger(__name__)

BUNDLED_PACKAGE = "modlist"
BUNDLED_DATA_DIR = "data"
BUNDLED_FILENAME = "modinfo.json"


class ResourceLoadFailure(RuntimeError):
    """The modinfo resource is missing, unreadable, or not valid JSON data."""


def _coerce_status(value: Any) -> Any:
    """Return the matching `ModStatus`, or `value` unchanged when it is not one."""
    if isinstance(value, str):
        try:
            return ModStatus(value)
        except ValueError:
            return value
    return value


def _coerce_server(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    return value


def _record_from_obj(obj: dict[str, Any], *, where: str) -> ModInfo:
    if logger.isEnabledFor(logging.DEBUG):
        for v in check_modinfo_record(obj, where=where):
            logger.debug("unchecked load keeps mismatched record: %s", v)

    optional = {k: obj.get(k) for k in OPTIONAL_TEXT_FIELDS}
    return ModInfo(
        name=obj.get("name"),
        status=_coerce_status(obj.get("status")),
        server=_coerce_server(obj.get("server")),
        **optional,
    )


def parse_modinfo(data: Any, *, validate: bool = False) -> tuple[ModInfo, ...]:
    """Relabel decoded modinfo JSON as an immutable tuple of `ModInfo`.

    Order is preserved. An empty array yields an empty tuple.
    """
    if not isinstance(data, list):
        raise ResourceLoadFailure(f"modinfo: expected JSON array, got {type(data).__name__}")
    for i, obj in enumerate(data):
        if not isinstance(obj, dict):
            raise ResourceLoadFailure(f"modinfo[{i}]: expected JSON object, got {type(obj).__name__}")

    if validate:
        validate_modinfo_records(data)

    return tuple(_record_from_obj(obj, where=f"modinfo[{i}]") for i, obj in enumerate(data))


def _decode(text: str, *, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ResourceLoadFailure(f"{source}: invalid JSON: {e}") from e


def read_modinfo_json(path: str | Path, *, validate: bool = False) -> tuple[ModInfo, ...]:
    """Read a modinfo JSON file and return its records in file order."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadFailure(f"{p}: cannot read modinfo resource: {e}") from e

    mods = parse_modinfo(_decode(text, source=str(p)), validate=validate)
    logger.debug("loaded %d mod(s) from %s", len(mods), p)
    return mods


def load_bundled_modinfo(*, validate: bool = False) -> tuple[ModInfo, ...]:
    """Read the modinfo JSON shipped inside the `modlist` package."""
    resource = resources.files(BUNDLED_PACKAGE) / BUNDLED_DATA_DIR / BUNDLED_FILENAME
    source = f"{BUNDLED_PACKAGE}/{BUNDLED_DATA_DIR}/{BUNDLED_FILENAME}"
    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadFailure(f"{source}: cannot read bundled modinfo resource: {e}") from e

    mods = parse_modinfo(_decode(text, source=source), validate=validate)
    logger.debug("loaded %d bundled mod(s) from %s", len(mods), source)
    return mods


def _json_value(value: Any) -> Any:
    if isinstance(value, ModStatus):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


def modinfo_to_json_dict(mod: ModInfo) -> dict[str, Any]:
    """Convert a record to a JSON-ready dict in canonical key order.

    Absent (`None`) fields are omitted; `server` becomes a list.
    """
    out: dict[str, Any] = {}
    for key in MODINFO_FIELDS:
        value = getattr(mod, key)
        if value is None:
            continue
        out[key] = _json_value(value)
    return out


def modinfo_list_to_json(mods: Iterable[ModInfo]) -> list[dict[str, Any]]:
    return [modinfo_to_json_dict(m) for m in mods]


def dumps_modinfo(mods: Iterable[ModInfo]) -> str:
    """Serialize records as newline-terminated JSON text (indent=2, key order kept)."""
    text = json.dumps(modinfo_list_to_json(mods), indent=2, ensure_ascii=False)
    if not text.endswith("\n"):
        text += "\n"
    return text


def write_modinfo_json(mods: Iterable[ModInfo], path: str | Path) -> None:
    """Write records to `path` deterministically."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dumps_modinfo(mods), encoding="utf-8")


__all__ = [
    "ResourceLoadFailure",
    "dumps_modinfo",
    "load_bundled_modinfo",
    "modinfo_list_to_json",
    "modinfo_to_json_dict",
    "parse_modinfo",
    "read_modinfo_json",
    "write_modinfo_json",
]

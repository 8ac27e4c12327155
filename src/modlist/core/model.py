"""Core data model for modlist.

- `ModStatus`: closed set of allowance classifications.
- `ModInfo`: one immutable record per mod.

The model itself performs no validation. Records built from untrusted data may
carry raw values that do not match the annotations; see
`modlist.core.validate` for the opt-in strict check.

This module must not import io/cli/registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ModStatus(str, Enum):
    """Allowance classification of a mod.

    A `str` enum, so `ModStatus.ALLOWED == "allowed"` holds.
    """

    ALLOWED = "allowed"
    DISALLOWED = "disallowed"
    PARTIALLY_ALLOWED = "partially_allowed"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


MOD_STATUS_VALUES: tuple[str, ...] = tuple(s.value for s in ModStatus)


@dataclass(frozen=True)
class ModInfo:
    """Metadata for a single mod.

    `name` and `status` are required; every other field is `None` when omitted
    in the source. An empty string is kept as-is.

    `server` lists the servers the status applies to. `None` means the status
    applies everywhere. Entries are kept verbatim (no dedupe or case folding).
    """

    name: str
    status: ModStatus
    url: Optional[str] = None
    modrinth: Optional[str] = None
    curseforge: Optional[str] = None
    version: Optional[str] = None
    icon: Optional[str] = None
    note: Optional[str] = None
    server: Optional[tuple[str, ...]] = None


# Canonical field order (JSON keys and table columns). Differs from the
# dataclass order, which has to put required fields first.
MODINFO_FIELDS: tuple[str, ...] = (
    "name",
    "url",
    "modrinth",
    "curseforge",
    "version",
    "icon",
    "status",
    "note",
    "server",
)
REQUIRED_FIELDS: tuple[str, ...] = ("name", "status")
OPTIONAL_TEXT_FIELDS: tuple[str, ...] = ("url", "modrinth", "curseforge", "version", "icon", "note")

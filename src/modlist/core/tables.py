"""Tabular view of a mod registry.

A registry is displayed and exported as a pandas DataFrame with one row per
record. This module is the single source of truth for:

- the canonical column order (same as the JSON key order)
- column dtypes (pandas `string` extension dtype, missing values as `<NA>`)

Rows keep the registry order; nothing is sorted or deduplicated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from modlist.core.model import MODINFO_FIELDS, ModInfo

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


MODINFO_COLUMNS: list[str] = list(MODINFO_FIELDS)

# Separator used to flatten `server` into a single cell.
SERVER_SEPARATOR = ", "


def _cell(mod: ModInfo, column: str) -> Any:
    value = getattr(mod, column)
    if value is None:
        return None
    if column == "server":
        return SERVER_SEPARATOR.join(str(s) for s in value)
    # str() unwraps ModStatus to its value; raw (unchecked) values pass through as text.
    return str(value)


def modinfo_to_dataframe(mods: Iterable[ModInfo]) -> "pd.DataFrame":
    """Return a DataFrame with one row per record, in registry order.

    Post-conditions:
    - columns are exactly `MODINFO_COLUMNS`, in that order
    - every column is pandas string dtype
    - absent fields are `<NA>`
    - index is a RangeIndex
    """
    import pandas as pd

    rows = [{c: _cell(m, c) for c in MODINFO_COLUMNS} for m in mods]
    df = pd.DataFrame(rows, columns=MODINFO_COLUMNS)
    for c in MODINFO_COLUMNS:
        df[c] = df[c].astype("string")
    return df.reset_index(drop=True)


__all__ = [
    "MODINFO_COLUMNS",
    "SERVER_SEPARATOR",
    "modinfo_to_dataframe",
]

"""`modlist list` command.

Prints the registry in source order:
- `table` (default): name, status and server columns
- `csv`: every column, see `modlist.core.tables.MODINFO_COLUMNS`
- `json`: the canonical modinfo JSON array

Reads the bundled registry unless `--path` points at another modinfo JSON file.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from modlist.core.model import ModInfo, ModStatus
from modlist.core.tables import modinfo_to_dataframe
from modlist.io.modinfo import ResourceLoadFailure, dumps_modinfo, read_modinfo_json

TABLE_COLUMNS = ["name", "status", "server"]


class OutputFormat(str, Enum):
    table = "table"
    csv = "csv"
    json = "json"


def _load(path: Optional[str]) -> tuple[ModInfo, ...]:
    if path:
        return read_modinfo_json(Path(path))
    from modlist.registry import get_mods

    return get_mods()


def _render(mods: tuple[ModInfo, ...], fmt: OutputFormat) -> str:
    if fmt is OutputFormat.json:
        return dumps_modinfo(mods)

    df = modinfo_to_dataframe(mods)
    if fmt is OutputFormat.csv:
        return df.to_csv(index=False, lineterminator="\n")

    if df.empty:
        return "(no mods)\n"
    return df.loc[:, TABLE_COLUMNS].to_string(index=False, na_rep="-") + "\n"


def register(app: typer.Typer) -> None:
    @app.command("list")
    def list_mods(
        path: Optional[str] = typer.Option(None, "--path", help="modinfo JSON file to read instead of the bundled one."),
        status: Optional[ModStatus] = typer.Option(None, "--status", help="Only show mods with this status."),
        fmt: OutputFormat = typer.Option(OutputFormat.table, "--format", help="Output format."),
    ) -> None:
        """List mods in registry order."""
        try:
            mods = _load(path)
        except ResourceLoadFailure as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        if status is not None:
            mods = tuple(m for m in mods if m.status == status)

        typer.echo(_render(mods, fmt), nl=False)

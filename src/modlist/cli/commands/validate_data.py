"""`modlist validate` command.

Runs the strict schema check (`modlist.core.validate`) over the bundled
modinfo JSON, or over `--path`. The registry itself never does this.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from modlist.core.validate import SchemaViolation
from modlist.io.modinfo import ResourceLoadFailure, load_bundled_modinfo, read_modinfo_json


def register(app: typer.Typer) -> None:
    @app.command("validate")
    def validate(
        path: Optional[str] = typer.Option(None, "--path", help="modinfo JSON file to check instead of the bundled one."),
    ) -> None:
        """Check modinfo JSON against the ModInfo shape."""
        try:
            if path:
                mods = read_modinfo_json(Path(path), validate=True)
            else:
                mods = load_bundled_modinfo(validate=True)
        except (SchemaViolation, ResourceLoadFailure) as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1) from e

        typer.echo(f"OK ({len(mods)} mods)")

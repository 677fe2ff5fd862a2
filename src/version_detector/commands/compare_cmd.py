from __future__ import annotations
import typer
from version_detector import versioning as _versioning


def run_compare(a: str, b: str):
    for value in (a, b):
        if not _versioning.is_valid_version(value):
            typer.echo(f"Invalid semantic version format: {value}", err=True)
            raise typer.Exit(code=2)
    typer.echo(str(_versioning.compare(a, b)))

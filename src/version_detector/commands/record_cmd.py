from __future__ import annotations
from pathlib import Path
from typing import Optional
import typer
from version_detector.errors import InvalidVersionFormatError
from version_detector.tracking import read_tracked_version, write_tracked_version
from version_detector.commands.common import resolve_config


def run_record(version: str, version_file: Optional[Path] = None):
    """Write `version` to the tracking file after a successful build."""
    target = resolve_config(version_file=version_file).version_file
    previous = read_tracked_version(target)
    try:
        write_tracked_version(target, version)
    except InvalidVersionFormatError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    except OSError as exc:
        typer.echo(f"Failed to write version tracking file {target}: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Recorded {version.strip()} in {target} (was {previous})")

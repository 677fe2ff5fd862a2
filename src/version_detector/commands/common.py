"""Shared helpers for version-detector CLI commands."""

from __future__ import annotations
from pathlib import Path
from typing import Optional
import math
import typer
from version_detector.config import DetectorConfig, load_config


def resolve_config(
    version_file: Optional[Path] = None,
    package: Optional[str] = None,
    registry_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> DetectorConfig:
    """Return the effective configuration.

    Priority: explicit CLI option > env var / .env > built-in default.
    """
    root = Path.cwd()
    if version_file is not None and not version_file.is_absolute():
        version_file = root / version_file
    if timeout is not None and not (math.isfinite(timeout) and timeout > 0):
        raise typer.BadParameter(f"Timeout must be a positive number of seconds, got {timeout}")
    return load_config(root).with_overrides(
        version_file=version_file,
        package=package,
        registry_url=registry_url,
        timeout=timeout,
    )


def emit_summary(values: dict) -> None:
    typer.echo("📤 Outputs set:")
    for name, value in values.items():
        typer.echo(f"   {name}: {value}")

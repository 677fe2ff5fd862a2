"""
version-detector CLI

Entry point used by the CI workflow to decide whether the Docker image
wrapping the tracked CLI tool needs a rebuild.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from version_detector import __version__
from version_detector.commands import run_compare, run_detect, run_record
from version_detector.logging_utils import setup_logging

app = typer.Typer(
    name="version-detector",
    help="Detect new registry releases of a CLI tool and emit CI build outputs.",
    add_completion=False,
    no_args_is_help=True,
)

VersionFileOption = Annotated[
    Optional[Path],
    typer.Option(
        "--version-file",
        help="Version tracking file (default: .locize-cli-version or VERSION_DETECTOR_VERSION_FILE).",
    ),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"version-detector {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging.")
    ] = False,
) -> None:
    setup_logging(verbose)


@app.command()
def detect(
    force: Annotated[
        bool,
        typer.Option("--force", help="Build regardless of version comparison (also FORCE_BUILD=true)."),
    ] = False,
    version_file: VersionFileOption = None,
    package: Annotated[
        Optional[str], typer.Option("--package", help="Registry package name.")
    ] = None,
    registry_url: Annotated[
        Optional[str], typer.Option("--registry-url", help="Registry base URL.")
    ] = None,
    timeout: Annotated[
        Optional[float], typer.Option("--timeout", help="Request timeout in seconds.")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging.")
    ] = False,
) -> None:
    """Compare the registry's latest version with the tracked one and set CI outputs."""
    if verbose:
        setup_logging(verbose)
    run_detect(force, version_file, package, registry_url, timeout)


@app.command()
def compare(
    a: Annotated[str, typer.Argument(help="First version.")],
    b: Annotated[str, typer.Argument(help="Second version.")],
) -> None:
    """Print -1, 0 or 1 comparing A to B (pre-release/build suffixes are ignored)."""
    run_compare(a, b)


@app.command()
def record(
    version: Annotated[str, typer.Argument(help="Version that was just built.")],
    version_file: VersionFileOption = None,
) -> None:
    """Store VERSION in the version tracking file."""
    run_record(version, version_file)


if __name__ == "__main__":
    app()

from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional
import uuid
import typer


def _format_entry(name: str, value: str) -> str:
    if "\n" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_output(name: str, value: str, output_file: Optional[Path] = None) -> None:
    """Append one output to the GitHub Actions output file.

    Without an output file (local runs) the legacy ::set-output command is
    printed instead.
    """
    if output_file is not None:
        with output_file.open("a", encoding="utf-8") as fh:
            fh.write(_format_entry(name, value))
    else:
        typer.echo(f"::set-output name={name}::{value}")


def set_outputs(values: Dict[str, str], output_file: Optional[Path] = None) -> None:
    for name, value in values.items():
        set_output(name, value, output_file)

from __future__ import annotations
from pathlib import Path
from typing import Optional
import requests
import typer
from version_detector.decision import decide, failed
from version_detector.errors import VersionDetectorError
from version_detector.logging_utils import log_error, log_step, log_success
from version_detector.outputs import set_outputs
from version_detector.registry import fetch_latest_version
from version_detector.tracking import read_tracked_version
from version_detector.commands.common import emit_summary, resolve_config


def run_detect(
    force: bool,
    version_file: Optional[Path] = None,
    package: Optional[str] = None,
    registry_url: Optional[str] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
):
    """Fetch, compare, decide and emit outputs. Exits 1 if the latest version is unknown."""
    config = resolve_config(version_file, package, registry_url, timeout)
    force_build = force or config.force_build

    log_step(f"Detecting {config.package} version changes...")
    log_step(f"Fetching latest version from {config.registry_url}...")
    try:
        latest = fetch_latest_version(config, session=session)
    except VersionDetectorError as exc:
        log_error(str(exc))
        decision = failed(str(exc))
        set_outputs(decision.as_outputs(), config.output_file)
        raise typer.Exit(code=1)
    log_success(f"Latest version from registry: {latest}")

    current = read_tracked_version(config.version_file)
    log_step(f"Current tracked version: {current}")

    decision = decide(latest, current, force_build=force_build)
    outputs = decision.as_outputs()
    set_outputs(outputs, config.output_file)
    emit_summary(outputs)
    return decision

from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

from version_detector.errors import FileReadError, InvalidVersionFormatError
from version_detector.logging_utils import log_warning
from version_detector.versioning import DEFAULT_VERSION, is_valid_version

logger = logging.getLogger(__name__)


def _read_marker(path: Path) -> Optional[str]:
    """Return the trimmed marker contents, or None if there is no marker file."""
    try:
        return path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Failed to read version tracking file {path}: {e}") from e


def read_tracked_version(path: Path) -> str:
    """Return the version recorded in the marker file at `path`.

    Missing file: "0.0.0" silently. Unreadable file or invalid content:
    warning, then "0.0.0". A broken marker must never block a build decision.
    """
    try:
        version = _read_marker(path)
    except FileReadError as e:
        log_warning(f"{e}. Using {DEFAULT_VERSION}")
        return DEFAULT_VERSION
    if version is None:
        logger.debug(f"No version tracking file at {path}; using {DEFAULT_VERSION}")
        return DEFAULT_VERSION
    if not is_valid_version(version):
        log_warning(f"Invalid version format in tracking file: {version}. Using {DEFAULT_VERSION}")
        return DEFAULT_VERSION
    return version


def write_tracked_version(path: Path, version: str) -> None:
    """Persist `version` as the new marker (used after a successful build)."""
    version = version.strip()
    if not is_valid_version(version):
        raise InvalidVersionFormatError(version, where="tracked version")
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(version + "\n", encoding="utf-8")
    tmp.replace(path)

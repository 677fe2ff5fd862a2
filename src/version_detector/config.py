"""
Detector configuration - environment variables and defaults.
"""

from __future__ import annotations
import math
import os
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from version_detector import __version__

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE = "locize-cli"
DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"
DEFAULT_VERSION_FILE = ".locize-cli-version"
DEFAULT_TIMEOUT_SECONDS = 10.0

PACKAGE_ENV = "VERSION_DETECTOR_PACKAGE"
REGISTRY_URL_ENV = "VERSION_DETECTOR_REGISTRY_URL"
VERSION_FILE_ENV = "VERSION_DETECTOR_VERSION_FILE"
TIMEOUT_ENV = "VERSION_DETECTOR_TIMEOUT"
FORCE_BUILD_ENV = "FORCE_BUILD"
GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"


@dataclass(frozen=True)
class DetectorConfig:
    package: str = DEFAULT_PACKAGE
    registry_url: str = DEFAULT_REGISTRY_URL
    version_file: Path = Path(DEFAULT_VERSION_FILE)
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    force_build: bool = False
    output_file: Optional[Path] = None

    @property
    def user_agent(self) -> str:
        return f"{self.package}-docker-version-detector/{__version__}"

    @property
    def latest_url(self) -> str:
        return f"{self.registry_url.rstrip('/')}/{self.package}/latest"

    def with_overrides(self, **overrides) -> "DetectorConfig":
        """Return a copy where every non-None override replaces the env value."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _env_timeout() -> float:
    raw = os.getenv(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if not (math.isfinite(value) and value > 0):
        logger.warning(f"Invalid {TIMEOUT_ENV} '{raw}', defaulting to {DEFAULT_TIMEOUT_SECONDS:g}s")
        return DEFAULT_TIMEOUT_SECONDS
    return value


def force_build_requested() -> bool:
    return (os.getenv(FORCE_BUILD_ENV) or "").strip().lower() == "true"


def load_config(root: Optional[Path] = None) -> DetectorConfig:
    """Build the configuration from `.env` (if present) and the environment.

    Relative version file paths resolve against `root` (default: cwd).
    """
    root = root or Path.cwd()
    env_file = root / ".env"
    if env_file.is_file():
        load_dotenv(env_file, override=False)

    version_file = Path(os.getenv(VERSION_FILE_ENV) or DEFAULT_VERSION_FILE)
    if not version_file.is_absolute():
        version_file = root / version_file
    output_file = os.getenv(GITHUB_OUTPUT_ENV)

    return DetectorConfig(
        package=(os.getenv(PACKAGE_ENV) or DEFAULT_PACKAGE).strip(),
        registry_url=(os.getenv(REGISTRY_URL_ENV) or DEFAULT_REGISTRY_URL).strip(),
        version_file=version_file,
        timeout=_env_timeout(),
        force_build=force_build_requested(),
        output_file=Path(output_file) if output_file else None,
    )

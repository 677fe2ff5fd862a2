"""
Registry client: fetches the latest published version of a package.

Talks to the npm registry "latest" dist-tag endpoint
(https://registry.npmjs.org/<package>/latest), which answers with the
package.json of the latest release.
"""

from __future__ import annotations
import logging
from typing import Optional

import requests

from version_detector.config import DetectorConfig
from version_detector.errors import (
    InvalidVersionFormatError,
    MalformedResponseError,
    RegistryTimeoutError,
    TransportError,
)
from version_detector.versioning import is_valid_version

logger = logging.getLogger(__name__)


def fetch_latest_version(
    config: DetectorConfig, session: Optional[requests.Session] = None
) -> str:
    """
    Fetch and validate the latest version of `config.package`.

    Single attempt, bounded by `config.timeout` seconds.

    Raises:
        RegistryTimeoutError: the deadline expired
        TransportError: connection failure or non-success HTTP status
        MalformedResponseError: body is not JSON or has no version field
        InvalidVersionFormatError: the version is not a semantic version
    """
    http = session or requests.Session()
    headers = {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }

    logger.debug(f"GET {config.latest_url} (timeout {config.timeout:g}s)")
    try:
        response = http.get(config.latest_url, headers=headers, timeout=config.timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise RegistryTimeoutError(
            f"Request to registry timed out after {config.timeout:g}s"
        ) from e
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Failed to fetch from registry: {e}") from e
    finally:
        if session is None:
            http.close()

    try:
        package_info = response.json()
    except ValueError as e:
        raise MalformedResponseError(f"Failed to parse registry response: {e}") from e

    version = package_info.get("version") if isinstance(package_info, dict) else None
    if not version:
        raise MalformedResponseError("No version field found in registry response")
    if not isinstance(version, str) or not is_valid_version(version):
        raise InvalidVersionFormatError(str(version))

    logger.debug(f"Registry reports {config.package}@{version}")
    return version

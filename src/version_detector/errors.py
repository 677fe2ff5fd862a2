"""Error kinds raised while resolving the latest and tracked versions."""

from __future__ import annotations


class VersionDetectorError(Exception):
    """Base class for every failure the detector reports."""


class TransportError(VersionDetectorError):
    """The registry request failed (connection problem or HTTP error status)."""


class RegistryTimeoutError(VersionDetectorError, TimeoutError):
    """The registry did not answer before the deadline."""


class MalformedResponseError(VersionDetectorError):
    """The registry answered but the body carries no usable version field."""


class InvalidVersionFormatError(VersionDetectorError):
    def __init__(self, version: str, where: str = "registry response"):
        self.version = version
        super().__init__(f"Invalid semantic version format in {where}: {version}")


class FileReadError(VersionDetectorError):
    """The tracked version file exists but could not be read.

    Recovered by the tracked version reader, never surfaced to the CLI.
    """

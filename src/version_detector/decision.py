"""Build decision policy on top of the version comparator."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from version_detector import versioning as _versioning
from version_detector.logging_utils import log_step, log_success, log_warning

REASON_FORCED = "forced"
REASON_NEWER = "newer"
REASON_UNCHANGED = "unchanged"
REASON_BEHIND = "behind"
REASON_ERROR = "error"


@dataclass(frozen=True)
class Decision:
    latest_version: Optional[str]
    current_version: Optional[str]
    should_build: bool
    reason: str
    error: Optional[str] = None

    def as_outputs(self) -> Dict[str, str]:
        """Key/value pairs for the CI output channel, in emission order."""
        if self.error is not None:
            return {"error": self.error, "should_build": "false"}
        return {
            "new_version": self.latest_version or "",
            "current_version": self.current_version or "",
            "should_build": "true" if self.should_build else "false",
        }


def decide(latest: str, current: str, force_build: bool = False) -> Decision:
    if force_build:
        log_step("Force build requested")
        return Decision(latest, current, True, REASON_FORCED)

    cmp = _versioning.compare(latest, current)
    if cmp > 0:
        log_success(f"Version changed from {current} to {latest}")
        return Decision(latest, current, True, REASON_NEWER)
    if cmp == 0:
        log_success("No version change detected")
        return Decision(latest, current, False, REASON_UNCHANGED)
    # Registry serving a stale or rolled-back latest; do not build.
    log_warning(f"Latest version ({latest}) is older than tracked version ({current})")
    return Decision(latest, current, False, REASON_BEHIND)


def failed(error: str) -> Decision:
    """Fail-safe decision for a run that could not determine the latest version."""
    return Decision(None, None, False, REASON_ERROR, error=error)

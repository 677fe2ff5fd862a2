from __future__ import annotations
import re

SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+(-[\w.-]+)?(\+[\w.-]+)?$", re.ASCII)

# Sentinel for "never tracked".
DEFAULT_VERSION = "0.0.0"


def is_valid_version(value: str) -> bool:
    return bool(value) and SEMVER_PATTERN.fullmatch(value) is not None


def _core(v: str) -> str:
    return re.split(r"[-+]", v, maxsplit=1)[0]


def compare(a: str, b: str) -> int:
    """Return -1 if a<b, 0 if equal, 1 if a>b.

    Only the numeric major.minor.patch core takes part; pre-release and build
    suffixes are ignored, so "1.2.3-beta" and "1.2.3" compare equal. Known
    limitation kept as-is because build decisions rely on it.
    Inputs are expected to have passed is_valid_version already.
    """
    def parts(v: str):
        return [int(x) for x in _core(v).split(".")]
    pa, pb = parts(a), parts(b)
    width = max(len(pa), len(pb))
    pa += [0] * (width - len(pa))
    pb += [0] * (width - len(pb))
    for x, y in zip(pa, pb):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0

# Friendly public name used by the CLI and tests.
compare_versions = compare

__all__ = ["SEMVER_PATTERN", "DEFAULT_VERSION", "is_valid_version", "compare", "compare_versions"]

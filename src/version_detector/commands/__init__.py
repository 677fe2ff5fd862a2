"""Command subpackage grouping individual version-detector CLI commands."""
from .detect_cmd import run_detect  # noqa: F401
from .compare_cmd import run_compare  # noqa: F401
from .record_cmd import run_record  # noqa: F401

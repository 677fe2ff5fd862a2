"""
Logging helpers with the step markers shown in CI job logs.
"""

import logging

logger = logging.getLogger("version_detector")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(verbose=False):
    """Configure root logging once for a CLI run"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def log_step(message):
    logger.info(f"🔍 {message}")


def log_success(message):
    logger.info(f"✅ {message}")


def log_warning(message):
    """Log a non-fatal anomaly; the run still completes"""
    logger.warning(f"⚠️  Warning: {message}")


def log_error(message):
    logger.error(f"❌ Error: {message}")

"""Detect new registry releases of a CLI tool and decide whether CI should rebuild."""

__version__ = "1.0.0"

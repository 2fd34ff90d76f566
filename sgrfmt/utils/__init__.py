"""Utility helpers for sgrfmt."""

from sgrfmt.utils.logging import LogLevel, configure_logging

__all__ = ["LogLevel", "configure_logging"]

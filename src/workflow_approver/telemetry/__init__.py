"""Telemetry and logging utilities."""

from .logger import configure_logging
from .workflow_commands import set_failed, set_output

__all__ = ["configure_logging", "set_failed", "set_output"]

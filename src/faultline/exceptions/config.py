"""Configuration-related exceptions."""

from __future__ import annotations

from faultline.exceptions.base import FaultlineError


class ConfigError(FaultlineError, ValueError):
    """Raised when reporter configuration is invalid."""

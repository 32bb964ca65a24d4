"""Shared exception hierarchy for Faultline."""

from __future__ import annotations

from .base import FaultlineError
from .config import ConfigError
from .result import ResultError

__all__ = [
    "ConfigError",
    "FaultlineError",
    "ResultError",
]

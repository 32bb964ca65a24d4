"""Configuration loading and normalization for Faultline reports."""

from __future__ import annotations

from faultline.config.loader import load_config, suggest_key
from faultline.config.model import FaultlineConfig

__all__ = [
    "FaultlineConfig",
    "load_config",
    "suggest_key",
]

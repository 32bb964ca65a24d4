"""Base exception for Faultline."""

from __future__ import annotations


class FaultlineError(Exception):
    """Base class for all Faultline errors."""

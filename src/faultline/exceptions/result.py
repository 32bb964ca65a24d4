"""Analysis-result exceptions."""

from __future__ import annotations

from faultline.exceptions.base import FaultlineError


class ResultError(FaultlineError, ValueError):
    """Raised when an analysis result breaks its construction invariants."""

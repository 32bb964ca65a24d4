"""Report status codes returned by reporters."""

from __future__ import annotations

from enum import IntEnum


class ResultStatus(IntEnum):
    """Binary report outcome, usable directly as a process exit code."""

    SUCCESS = 0
    FAILURE = 1

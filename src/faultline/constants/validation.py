"""Stable validation error codes for analysis-result documents."""

from __future__ import annotations

RES001: str = "RES001"  # result file not found or unreadable
RES002: str = "RES002"  # invalid JSON
RES003: str = "RES003"  # schema violation
RES004: str = "RES004"  # model invariant violation

"""Branding constants for terminal output."""

from __future__ import annotations

CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ FAULTLINE",
        "     // terminal reports for static analysis findings",
    )
)

"""Configuration defaults, filenames, and allowed keys."""

from __future__ import annotations

from faultline.constants.reporting import DEFAULT_FORMATTER

CONFIG_FILENAME: str = "faultline.yaml"

VALID_COLOR_MODES: frozenset[str] = frozenset({"auto", "always", "never"})
DEFAULT_COLOR_MODE: str = "auto"
DEFAULT_FORMATTER_NAME: str = DEFAULT_FORMATTER

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "formatter",
        "color",
        "terminal_width",
    }
)

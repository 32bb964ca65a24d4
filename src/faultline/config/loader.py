"""Config loading and normalization for Faultline reports."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

import yaml

from faultline.config.model import FaultlineConfig
from faultline.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_COLOR_MODE,
    DEFAULT_FORMATTER_NAME,
    VALID_COLOR_MODES,
)
from faultline.exceptions import ConfigError
from faultline.reporting.registry import available_formatters

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> FaultlineConfig:
    """Load and validate reporter config from ``faultline.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using defaults", path)
        return FaultlineConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw, key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            hint = suggest_key(str(key), ALLOWED_CONFIG_KEYS)
            raise ConfigError(f"unknown key `{key}`" + (f" ({hint})" if hint else ""))

    formatter = raw.get("formatter", DEFAULT_FORMATTER_NAME)
    if not isinstance(formatter, str) or formatter not in available_formatters():
        raise ConfigError(f"formatter must be one of {list(available_formatters())}, got {formatter!r}")

    color = raw.get("color", DEFAULT_COLOR_MODE)
    if not isinstance(color, str) or color not in VALID_COLOR_MODES:
        raise ConfigError(f"color must be one of {sorted(VALID_COLOR_MODES)}, got {color!r}")

    width = raw.get("terminal_width")
    if width is not None and (isinstance(width, bool) or not isinstance(width, int) or width <= 0):
        raise ConfigError("terminal_width must be a positive integer")

    logger.debug("Loaded config from %s", path)
    return FaultlineConfig(
        formatter=formatter,
        color=color,  # type: ignore[arg-type]
        terminal_width=width,
    )


def suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""

"""Terminal size detection."""

from __future__ import annotations

import shutil
from collections.abc import Callable

from faultline.constants.reporting import DEFAULT_TERMINAL_HEIGHT, DEFAULT_TERMINAL_WIDTH

type WidthProvider = Callable[[], int]


def terminal_width() -> int:
    """Return the current terminal width in columns.

    ``COLUMNS`` wins when set; otherwise the attached terminal is queried,
    falling back to 80 columns when stdout is not a terminal.
    """
    return shutil.get_terminal_size(fallback=(DEFAULT_TERMINAL_WIDTH, DEFAULT_TERMINAL_HEIGHT)).columns


def fixed_width(columns: int) -> WidthProvider:
    """Return a width provider that always reports ``columns``."""

    def _provider() -> int:
        return columns

    return _provider

"""Config data model for Faultline reports."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TextIO

from faultline.constants.config import DEFAULT_COLOR_MODE, DEFAULT_FORMATTER_NAME
from faultline.reporting.terminal import WidthProvider, fixed_width, terminal_width
from faultline.types import ColorMode


@dataclass(frozen=True)
class FaultlineConfig:
    """Resolved reporter config."""

    formatter: str = DEFAULT_FORMATTER_NAME
    color: ColorMode = DEFAULT_COLOR_MODE  # type: ignore[assignment]
    terminal_width: int | None = None

    def use_color(self, stream: TextIO) -> bool:
        """Whether ANSI colour should be written to ``stream``."""
        if self.color == "always":
            return True
        if self.color == "never":
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def width_provider(self) -> WidthProvider:
        """Width source for separators: the configured width, or the live terminal."""
        if self.terminal_width is not None:
            return fixed_width(self.terminal_width)
        return terminal_width

    def with_overrides(
        self,
        *,
        formatter: str | None = None,
        color: ColorMode | None = None,
        terminal_width: int | None = None,
    ) -> FaultlineConfig:
        """Return a copy with CLI-provided values taking precedence."""
        return replace(
            self,
            formatter=formatter if formatter is not None else self.formatter,
            color=color if color is not None else self.color,
            terminal_width=terminal_width if terminal_width is not None else self.terminal_width,
        )

"""Named reporter registry used by hosts to plug formatters in by configuration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from faultline.constants.reporting import DEFAULT_FORMATTER
from faultline.exceptions import ConfigError
from faultline.model import AnalysisResult
from faultline.reporting.formatter import ErrorFormatter
from faultline.reporting.output import Output
from faultline.reporting.status import ResultStatus

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Anything that can turn an analysis result into a report."""

    def format_result(self, result: AnalysisResult, output: Output) -> ResultStatus: ...


type ReporterFactory = Callable[..., Reporter]

_FORMATTERS: dict[str, ReporterFactory] = {}


def register_formatter(name: str, factory: ReporterFactory) -> None:
    """Register ``factory`` under ``name``; names are unique."""
    if not name or not name.strip():
        raise ConfigError("formatter name must be a non-empty string")
    if name in _FORMATTERS:
        raise ConfigError(f"formatter `{name}` is already registered")
    _FORMATTERS[name] = factory
    logger.debug("Registered formatter: %s", name)


def available_formatters() -> tuple[str, ...]:
    """Return registered formatter names in sorted order."""
    return tuple(sorted(_FORMATTERS))


def get_formatter(name: str, **options: Any) -> Reporter:
    """Instantiate the formatter registered under ``name``."""
    factory = _FORMATTERS.get(name)
    if factory is None:
        raise ConfigError(
            f"unknown formatter `{name}`; available formatters: {', '.join(available_formatters())}"
        )
    logger.debug("Using formatter: %s", name)
    return factory(**options)


register_formatter(DEFAULT_FORMATTER, ErrorFormatter)

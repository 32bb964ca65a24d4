"""Reporting package for Faultline outputs."""

from __future__ import annotations

from .formatter import ErrorFormatter, regex_message
from .output import BufferedOutput, ConsoleOutput, Output, OutputLine
from .registry import Reporter, available_formatters, get_formatter, register_formatter
from .status import ResultStatus

__all__ = [
    "BufferedOutput",
    "ConsoleOutput",
    "ErrorFormatter",
    "Output",
    "OutputLine",
    "Reporter",
    "ResultStatus",
    "available_formatters",
    "get_formatter",
    "regex_message",
    "register_formatter",
]

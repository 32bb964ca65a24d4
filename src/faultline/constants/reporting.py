"""Constants for terminal report layout and console styling."""

from __future__ import annotations

# Columns kept free so the rule does not wrap in Linux/Windows terminal windows.
TERMINAL_FIT_MARGIN: int = 8
DEFAULT_TERMINAL_WIDTH: int = 80
DEFAULT_TERMINAL_HEIGHT: int = 24

SEPARATOR_CHAR: str = "-"
LINE_INDENT: str = " "

# Tail appended by the analyser when an error comes from a trait/used context.
FILE_WITH_CONTEXT_PATTERN: str = r"(?P<file>.*?)(\s+\(in context.*)?"

SUCCESS_MESSAGE: str = "No errors"
ERROR_SUMMARY_TEMPLATE: str = "Found {count} errors"
RENDERED_IN_PREFIX: str = "rendered in: "
MESSAGE_TEMPLATE: str = " - '{payload}'"
MESSAGE_DELIMITER: str = "#"
IDENTIFIER_PREFIX: str = " 🪪 "

TEMPLATE_FILE_PATH_KEY: str = "template_file_path"
TEMPLATE_LINE_KEY: str = "template_line"

SUCCESS_LABEL: str = "[OK]"
WARNING_LABEL: str = "[WARNING]"
ERROR_LABEL: str = "[ERROR]"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"

DEFAULT_FORMATTER: str = "terminal"

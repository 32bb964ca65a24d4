"""Terminal error formatter for analysis results."""

from __future__ import annotations

import logging
import re

from faultline.constants.reporting import (
    ERROR_SUMMARY_TEMPLATE,
    IDENTIFIER_PREFIX,
    LINE_INDENT,
    MESSAGE_DELIMITER,
    MESSAGE_TEMPLATE,
    RENDERED_IN_PREFIX,
    SEPARATOR_CHAR,
    SUCCESS_MESSAGE,
    TERMINAL_FIT_MARGIN,
)
from faultline.model import AnalysisResult, Finding
from faultline.reporting.output import Output
from faultline.reporting.paths import PathResolver, relative_path, resolve_from_cwd
from faultline.reporting.status import ResultStatus
from faultline.reporting.terminal import WidthProvider, terminal_width

logger = logging.getLogger(__name__)


def regex_message(message: str) -> str:
    """Turn a finding message into a ``#...#`` regex literal that matches it."""
    # a trailing "." is punctuation, not part of the message
    trimmed = message.rstrip(".")
    return f"{MESSAGE_DELIMITER}{re.escape(trimmed)}{MESSAGE_DELIMITER}"


class ErrorFormatter:
    """Renders file-bound errors as separated, clickable blocks.

    Every block is framed by horizontal rules sized to the terminal, so the
    location line can be clicked in most terminal emulators and the message
    is quoted as a regex that an ignore list can reuse verbatim.
    """

    def __init__(
        self,
        *,
        width_provider: WidthProvider = terminal_width,
        path_resolver: PathResolver = resolve_from_cwd,
    ) -> None:
        self._width_provider = width_provider
        self._path_resolver = path_resolver

    def format_result(self, result: AnalysisResult, output: Output) -> ResultStatus:
        """Write the report for ``result`` to ``output`` and return its status."""
        if result.is_clean:
            output.success_line(SUCCESS_MESSAGE)
            return ResultStatus.SUCCESS

        separator = self._separator()
        for finding in result.file_specific_errors:
            self._print_single_error(finding, output, separator)

        output.blank_line()
        output.error_line(ERROR_SUMMARY_TEMPLATE.format(count=result.total_errors_count))

        for error in result.not_file_specific_errors:
            output.warning_line(error)
        for warning in result.warnings:
            output.warning_line(warning)

        logger.debug(
            "Reported %d finding(s), %d general error(s), %d warning(s)",
            len(result.file_specific_errors),
            len(result.not_file_specific_errors),
            len(result.warnings),
        )
        return ResultStatus.FAILURE

    def _print_single_error(self, finding: Finding, output: Output, separator: str) -> None:
        output.plain_line(separator)

        location = f"{self._relative_path(finding.file)}:{finding.line}"
        if finding.template is not None:
            template_location = f"{self._relative_path(finding.template.file)}:{finding.template.line}"
            output.plain_line(template_location)
            output.plain_line(f"{RENDERED_IN_PREFIX}{location}")
        else:
            # clickable path
            output.plain_line(f"{LINE_INDENT}{location}")
        output.plain_line(separator)

        output.plain_line(MESSAGE_TEMPLATE.format(payload=regex_message(finding.message)))

        if finding.is_suppressible:
            output.plain_line(f"{IDENTIFIER_PREFIX}{finding.identifier}")

        output.plain_line(separator)
        output.blank_line()

    def _separator(self) -> str:
        """Build the horizontal rule once per report so every block matches."""
        width = self._width_provider()
        return LINE_INDENT + SEPARATOR_CHAR * max(0, width - TERMINAL_FIT_MARGIN)

    def _relative_path(self, file_path: str) -> str:
        return relative_path(file_path, self._path_resolver)

"""Tests for the named formatter registry."""

from __future__ import annotations

import pytest

from faultline.exceptions import ConfigError
from faultline.model import AnalysisResult
from faultline.reporting import (
    BufferedOutput,
    ErrorFormatter,
    Output,
    ResultStatus,
    available_formatters,
    get_formatter,
    register_formatter,
    registry,
)
from faultline.reporting.terminal import fixed_width


class _CountingReporter:
    def format_result(self, result: AnalysisResult, output: Output) -> ResultStatus:
        output.plain_line(f"{len(result.file_specific_errors)} findings")
        return ResultStatus.SUCCESS if result.is_clean else ResultStatus.FAILURE


@pytest.fixture()
def counting_registered(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setattr(registry, "_FORMATTERS", dict(registry._FORMATTERS))
    register_formatter("counting", _CountingReporter)
    return "counting"


def test_terminal_formatter_is_registered_by_default() -> None:
    assert "terminal" in available_formatters()
    assert isinstance(get_formatter("terminal"), ErrorFormatter)


def test_get_formatter_passes_options_to_factory() -> None:
    reporter = get_formatter("terminal", width_provider=fixed_width(12))
    output = BufferedOutput()

    reporter.format_result(AnalysisResult.build(warnings=["w"]), output)

    assert output.texts()[:2] == ["", "Found 0 errors"]


def test_unknown_formatter_lists_available_names() -> None:
    with pytest.raises(ConfigError, match="unknown formatter `nope`.*terminal"):
        get_formatter("nope")


def test_custom_formatter_can_be_registered(counting_registered: str) -> None:
    output = BufferedOutput()

    status = get_formatter(counting_registered).format_result(AnalysisResult(), output)

    assert status is ResultStatus.SUCCESS
    assert output.texts() == ["0 findings"]
    assert counting_registered in available_formatters()


def test_duplicate_registration_is_rejected(counting_registered: str) -> None:
    with pytest.raises(ConfigError, match="already registered"):
        register_formatter(counting_registered, _CountingReporter)


def test_blank_formatter_name_is_rejected() -> None:
    with pytest.raises(ConfigError, match="non-empty"):
        register_formatter("  ", _CountingReporter)

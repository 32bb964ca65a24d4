"""Tests for the terminal error formatter."""

from __future__ import annotations

from pathlib import Path

import pytest

from faultline.model import AnalysisResult, Finding, TemplateOrigin
from faultline.reporting import BufferedOutput, ErrorFormatter, ResultStatus, regex_message
from faultline.reporting.terminal import fixed_width

WIDTH = 20
SEPARATOR = " " + "-" * (WIDTH - 8)


def _make_finding(
    *,
    file: str = "src/Foo.php",
    line: int = 10,
    message: str = "Found error.",
    identifier: str | None = None,
    can_be_suppressed: bool = False,
    template: TemplateOrigin | None = None,
) -> Finding:
    return Finding(
        file=file,
        line=line,
        message=message,
        identifier=identifier,
        can_be_suppressed=can_be_suppressed,
        template=template,
    )


def _render(result: AnalysisResult, width: int = WIDTH) -> tuple[ResultStatus, BufferedOutput]:
    output = BufferedOutput()
    status = ErrorFormatter(width_provider=fixed_width(width)).format_result(result, output)
    return status, output


def test_clean_result_reports_single_success_line() -> None:
    status, output = _render(AnalysisResult())

    assert status is ResultStatus.SUCCESS
    assert [(line.kind, line.text) for line in output.lines] == [("success", "No errors")]


def test_single_finding_renders_exact_block(workspace: Path) -> None:
    result = AnalysisResult.build([_make_finding()], total_errors_count=1)

    status, output = _render(result)

    assert status is ResultStatus.FAILURE
    assert [(line.kind, line.text) for line in output.lines] == [
        ("plain", SEPARATOR),
        ("plain", " src/Foo.php:10"),
        ("plain", SEPARATOR),
        ("plain", " - '#Found\\ error#'"),
        ("plain", SEPARATOR),
        ("blank", ""),
        ("blank", ""),
        ("error", "Found 1 errors"),
    ]


def test_template_finding_renders_origin_and_rendered_in_lines() -> None:
    finding = _make_finding(
        file="src/View.php (in context of class App\\View)",
        line=4,
        message="Variable $name might not be defined.",
        template=TemplateOrigin(file="templates/view.latte", line=7),
    )

    _, output = _render(AnalysisResult.build([finding]))

    assert output.texts()[:7] == [
        SEPARATOR,
        "templates/view.latte:7",
        "rendered in: src/View.php:4",
        SEPARATOR,
        " - '#Variable\\ \\$name\\ might\\ not\\ be\\ defined#'",
        SEPARATOR,
        "",
    ]


def test_template_and_direct_findings_share_block_frame() -> None:
    direct = _render(AnalysisResult.build([_make_finding()]))[1].texts()
    template = _render(
        AnalysisResult.build([_make_finding(template=TemplateOrigin(file="a.latte", line=1))])
    )[1].texts()

    assert direct.count(SEPARATOR) == 3
    assert template.count(SEPARATOR) == 3
    assert not any(text.startswith("rendered in: ") for text in direct)
    assert sum(text.startswith("rendered in: ") for text in template) == 1


def test_suppressible_identifier_line_is_rendered() -> None:
    finding = _make_finding(identifier="method.notFound", can_be_suppressed=True)

    _, output = _render(AnalysisResult.build([finding]))

    texts = output.texts()
    assert " 🪪 method.notFound" in texts
    assert texts.index(" 🪪 method.notFound") == texts.index(" - '#Found\\ error#'") + 1


def test_identifier_without_suppression_is_not_rendered() -> None:
    finding = _make_finding(identifier="method.notFound", can_be_suppressed=False)

    _, output = _render(AnalysisResult.build([finding]))

    assert not any("method.notFound" in text for text in output.texts())


def test_identifier_line_also_follows_template_findings() -> None:
    finding = _make_finding(
        identifier="variable.undefined",
        can_be_suppressed=True,
        template=TemplateOrigin(file="view.latte", line=2),
    )

    _, output = _render(AnalysisResult.build([finding]))

    assert " 🪪 variable.undefined" in output.texts()


def test_summary_uses_total_errors_count_not_listed_findings() -> None:
    result = AnalysisResult.build([_make_finding()], total_errors_count=5)

    _, output = _render(result)

    assert output.lines[-1].kind == "error"
    assert output.lines[-1].text == "Found 5 errors"


def test_general_errors_then_warnings_follow_summary_as_warning_lines() -> None:
    result = AnalysisResult.build(
        [_make_finding()],
        not_file_specific_errors=["Ignored pattern was not matched", "Bootstrap failed"],
        warnings=["Result cache not saved"],
        total_errors_count=3,
    )

    _, output = _render(result)

    tail = [(line.kind, line.text) for line in output.lines[-4:]]
    assert tail == [
        ("error", "Found 3 errors"),
        ("warning", "Ignored pattern was not matched"),
        ("warning", "Bootstrap failed"),
        ("warning", "Result cache not saved"),
    ]


def test_warnings_only_result_fails_with_summary() -> None:
    result = AnalysisResult.build(warnings=["Result cache not saved"])

    status, output = _render(result)

    assert status is ResultStatus.FAILURE
    assert [(line.kind, line.text) for line in output.lines] == [
        ("blank", ""),
        ("error", "Found 0 errors"),
        ("warning", "Result cache not saved"),
    ]


def test_findings_render_in_input_order() -> None:
    findings = [_make_finding(file=f"src/F{index}.php", line=index) for index in range(1, 4)]

    _, output = _render(AnalysisResult.build(findings))

    locations = [text for text in output.texts() if text.startswith(" src/")]
    assert locations == [" src/F1.php:1", " src/F2.php:2", " src/F3.php:3"]


@pytest.mark.parametrize("width", [9, 40, 120])
def test_every_separator_is_width_minus_margin(width: int) -> None:
    findings = [_make_finding(), _make_finding(template=TemplateOrigin(file="a.latte", line=3))]

    _, output = _render(AnalysisResult.build(findings), width=width)

    separators = [text for text in output.texts() if text.startswith(" -") and set(text[1:]) == {"-"}]
    assert len(separators) == 6
    assert all(len(text) == 1 + width - 8 for text in separators)


def test_narrow_terminal_yields_empty_rule() -> None:
    _, output = _render(AnalysisResult.build([_make_finding()]), width=5)

    assert output.texts()[0] == " "


def test_width_is_queried_once_per_report() -> None:
    calls: list[int] = []

    def _width() -> int:
        calls.append(1)
        return 30

    findings = [_make_finding(), _make_finding(line=11)]
    ErrorFormatter(width_provider=_width).format_result(AnalysisResult.build(findings), BufferedOutput())

    assert len(calls) == 1


def test_existing_paths_go_through_resolver(workspace: Path) -> None:
    seen: list[str] = []

    def _resolver(path: str) -> str:
        seen.append(path)
        return "resolved/Foo.php"

    finding = _make_finding(file="src/Foo.php (in context of class Foo)")
    output = BufferedOutput()
    ErrorFormatter(width_provider=fixed_width(WIDTH), path_resolver=_resolver).format_result(
        AnalysisResult.build([finding]), output
    )

    assert seen == ["src/Foo.php"]
    assert " resolved/Foo.php:10" in output.texts()


def test_absolute_existing_path_is_made_cwd_relative(workspace: Path) -> None:
    finding = _make_finding(file=str(workspace / "src" / "Foo.php"))

    _, output = _render(AnalysisResult.build([finding]))

    assert " src/Foo.php:10" in output.texts()


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        ("Unexpected type.", "#Unexpected\\ type#"),
        ("Done...", "#Done#"),
        ("No dot", "#No\\ dot#"),
        ("Call to foo()", "#Call\\ to\\ foo\\(\\)#"),
        ("Issue #12", "#Issue\\ \\#12#"),
    ],
    ids=["single_dot", "many_dots", "no_dot", "parentheses", "delimiter"],
)
def test_regex_message_trims_dots_and_escapes(message: str, expected: str) -> None:
    assert regex_message(message) == expected


def test_formatter_does_not_mutate_result() -> None:
    result = AnalysisResult.build([_make_finding()], warnings=["w"])
    before = result.to_dict()

    _render(result)

    assert result.to_dict() == before


def test_overlong_file_name_is_rendered_verbatim() -> None:
    overlong = "src/" + "a" * 300 + ".php"

    status, output = _render(AnalysisResult.build([_make_finding(file=overlong, line=1)]))

    assert status is ResultStatus.FAILURE
    assert f" {overlong}:1" in output.texts()

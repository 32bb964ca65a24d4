"""Immutable analysis-result entities consumed by reporters.

Invariants are checked at construction time so a reporter can assume a
well-formed snapshot and never has to validate its input.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from faultline.constants.reporting import TEMPLATE_FILE_PATH_KEY, TEMPLATE_LINE_KEY
from faultline.exceptions import ResultError
from faultline.types import JsonObject


@dataclass(frozen=True)
class TemplateOrigin:
    """Template location an error was rendered from."""

    file: str
    line: int

    def __post_init__(self) -> None:
        if not self.file:
            raise ResultError("template file path must be a non-empty string")
        if isinstance(self.line, bool) or not isinstance(self.line, int) or self.line < 1:
            raise ResultError(f"template line must be a positive integer, got {self.line!r}")

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any] | None) -> TemplateOrigin | None:
        """Build from analyser metadata; both keys must be set, or neither."""
        if not metadata:
            return None
        file_path = metadata.get(TEMPLATE_FILE_PATH_KEY)
        line = metadata.get(TEMPLATE_LINE_KEY)
        if file_path is None and line is None:
            return None
        if file_path is None or line is None:
            raise ResultError(
                f"template metadata requires both `{TEMPLATE_FILE_PATH_KEY}` and `{TEMPLATE_LINE_KEY}`"
            )
        return cls(file=file_path, line=line)

    def to_metadata(self) -> JsonObject:
        return {TEMPLATE_FILE_PATH_KEY: self.file, TEMPLATE_LINE_KEY: self.line}


@dataclass(frozen=True)
class Finding:
    """One analysis error bound to a file and line."""

    file: str
    line: int
    message: str
    identifier: str | None = None
    template: TemplateOrigin | None = None
    can_be_suppressed: bool = False

    def __post_init__(self) -> None:
        if not self.file:
            raise ResultError("finding file path must be a non-empty string")
        if isinstance(self.line, bool) or not isinstance(self.line, int) or self.line < 1:
            raise ResultError(f"finding line must be a positive integer, got {self.line!r}")

    @property
    def is_suppressible(self) -> bool:
        """Whether the finding names an identifier that can silence it."""
        return self.identifier is not None and self.can_be_suppressed

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Finding:
        """Build a finding from its JSON-compatible mapping."""
        return cls(
            file=data["file"],
            line=data["line"],
            message=data["message"],
            identifier=data.get("identifier"),
            template=TemplateOrigin.from_metadata(data.get("metadata")),
            can_be_suppressed=bool(data.get("can_be_suppressed", False)),
        )

    def to_dict(self) -> JsonObject:
        """Convert to a JSON-compatible mapping."""
        payload: JsonObject = {
            "file": self.file,
            "line": self.line,
            "message": self.message,
            "identifier": self.identifier,
            "can_be_suppressed": self.can_be_suppressed,
        }
        if self.template is not None:
            payload["metadata"] = self.template.to_metadata()
        return payload


@dataclass(frozen=True)
class AnalysisResult:
    """Snapshot of everything an analyser run reported."""

    file_specific_errors: tuple[Finding, ...] = ()
    not_file_specific_errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    total_errors_count: int = 0

    def __post_init__(self) -> None:
        count = self.total_errors_count
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ResultError(f"total_errors_count must be a non-negative integer, got {count!r}")
        if self.is_clean and count != 0:
            raise ResultError(f"total_errors_count is {count} but the result lists no errors or warnings")

    @property
    def is_clean(self) -> bool:
        """True when there is nothing to report."""
        return not (self.file_specific_errors or self.not_file_specific_errors or self.warnings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnalysisResult:
        """Build a result from its JSON-compatible mapping.

        ``total_errors_count`` defaults to the number of listed errors.
        """
        findings = tuple(Finding.from_dict(item) for item in data.get("file_specific_errors", ()))
        not_file_specific = tuple(data.get("not_file_specific_errors", ()))
        total = data.get("total_errors_count")
        if total is None:
            total = len(findings) + len(not_file_specific)
        return cls(
            file_specific_errors=findings,
            not_file_specific_errors=not_file_specific,
            warnings=tuple(data.get("warnings", ())),
            total_errors_count=total,
        )

    @classmethod
    def build(
        cls,
        findings: Sequence[Finding] = (),
        *,
        not_file_specific_errors: Sequence[str] = (),
        warnings: Sequence[str] = (),
        total_errors_count: int | None = None,
    ) -> AnalysisResult:
        """Convenience constructor that accepts any sequences."""
        if total_errors_count is None:
            total_errors_count = len(findings) + len(not_file_specific_errors)
        return cls(
            file_specific_errors=tuple(findings),
            not_file_specific_errors=tuple(not_file_specific_errors),
            warnings=tuple(warnings),
            total_errors_count=total_errors_count,
        )

    def to_dict(self) -> JsonObject:
        """Convert to a JSON-compatible mapping."""
        return {
            "file_specific_errors": [finding.to_dict() for finding in self.file_specific_errors],
            "not_file_specific_errors": list(self.not_file_specific_errors),
            "warnings": list(self.warnings),
            "total_errors_count": self.total_errors_count,
        }

"""Analysis-result document validation and loading.

Validation collects every problem as a :class:`ValidationError` so that
``faultline validate-result`` and ``faultline report`` share one path.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from jsonschema import Draft202012Validator

from faultline.constants.result_schema import ANALYSIS_RESULT_SCHEMA
from faultline.constants.validation import RES001, RES002, RES003, RES004
from faultline.exceptions import ResultError
from faultline.exceptions.validation import ValidationError, format_errors, sort_errors
from faultline.io import load_json_file
from faultline.model import AnalysisResult

logger = logging.getLogger(__name__)

_VALIDATOR = Draft202012Validator(ANALYSIS_RESULT_SCHEMA)


def _json_field(error_path: Iterable[object]) -> str:
    return ".".join(str(part) for part in error_path)


def _parse_document(path: Path) -> tuple[AnalysisResult | None, list[ValidationError]]:
    resolved = path.resolve()
    path_str = str(resolved)
    if not resolved.is_file():
        return None, [
            ValidationError(code=RES001, path=path_str, field="", message=f"result file not found: {resolved}")
        ]

    try:
        payload = load_json_file(resolved)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        return None, [ValidationError(code=RES002, path=path_str, field="", message=f"invalid JSON: {exc}")]
    except OSError as exc:
        return None, [
            ValidationError(code=RES001, path=path_str, field="", message=f"cannot read result file: {exc}")
        ]

    schema_errors = [
        ValidationError(
            code=RES003,
            path=path_str,
            field=_json_field(error.absolute_path),
            message=error.message,
        )
        for error in _VALIDATOR.iter_errors(payload)
    ]
    if schema_errors:
        return None, sort_errors(schema_errors)

    assert isinstance(payload, dict)
    try:
        result = AnalysisResult.from_dict(payload)
    except ResultError as exc:
        return None, [ValidationError(code=RES004, path=path_str, field="", message=str(exc))]
    return result, []


def validate_result_document(path: Path) -> list[ValidationError]:
    """Validate an analysis-result JSON document and return all errors found."""
    _, errors = _parse_document(path)
    return errors


def load_analysis_result(path: Path) -> AnalysisResult:
    """Load an analysis-result JSON document, raising ``ResultError`` when invalid."""
    result, errors = _parse_document(path)
    if errors:
        raise ResultError(format_errors(errors))
    assert result is not None
    logger.debug(
        "Loaded analysis result from %s: %d finding(s), %d warning(s)",
        path,
        len(result.file_specific_errors),
        len(result.warnings),
    )
    return result

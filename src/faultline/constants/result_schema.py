"""JSON Schema for analysis-result documents handed to the reporter."""

from __future__ import annotations

from faultline.types import JsonObject

FINDING_SCHEMA: JsonObject = {
    "type": "object",
    "required": ["file", "line", "message"],
    "additionalProperties": False,
    "properties": {
        "file": {"type": "string", "minLength": 1},
        "line": {"type": "integer", "minimum": 1},
        "message": {"type": "string"},
        "identifier": {"type": ["string", "null"]},
        "can_be_suppressed": {"type": "boolean"},
        "metadata": {
            "type": "object",
            "properties": {
                "template_file_path": {"type": ["string", "null"]},
                "template_line": {"type": ["integer", "null"], "minimum": 1},
            },
        },
    },
}

ANALYSIS_RESULT_SCHEMA: JsonObject = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Faultline analysis result",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "file_specific_errors": {"type": "array", "items": FINDING_SCHEMA},
        "not_file_specific_errors": {"type": "array", "items": {"type": "string"}},
        "warnings": {"type": "array", "items": {"type": "string"}},
        "total_errors_count": {"type": "integer", "minimum": 0},
    },
}

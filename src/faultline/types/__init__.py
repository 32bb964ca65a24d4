"""Shared type aliases for Faultline."""

from .common import ColorMode, JsonObject, JsonScalar, JsonValue, OutputKind

__all__ = [
    "ColorMode",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputKind",
]

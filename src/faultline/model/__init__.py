"""Core data models for Faultline."""

from .entities import AnalysisResult, Finding, TemplateOrigin

__all__ = [
    "AnalysisResult",
    "Finding",
    "TemplateOrigin",
]

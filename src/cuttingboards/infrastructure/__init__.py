"""Infrastructure layer - output formatting and serialization."""

from .formatters import (
    DesignOptionFormatter,
    JsonExporter,
    RequirementReportFormatter,
    report_to_dict,
)

__all__ = [
    "DesignOptionFormatter",
    "JsonExporter",
    "RequirementReportFormatter",
    "report_to_dict",
]

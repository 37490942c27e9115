"""Data schemas for the add-in validator."""

from .outcome import ValidationOutcome
from .service_response import ServiceResponse
from .check_report import (
    CheckReport,
    DiagnosticEntry,
    SupportedProduct,
    ValidationReport,
    parse_check_report,
)

__all__ = [
    "ValidationOutcome",
    "ServiceResponse",
    "CheckReport",
    "DiagnosticEntry",
    "SupportedProduct",
    "ValidationReport",
    "parse_check_report",
]

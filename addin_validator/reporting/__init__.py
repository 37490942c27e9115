"""Console report rendering for validation results."""

from .console import SEPARATOR, make_console
from .diagnostics import render_diagnostics, render_entry
from .errors import STATUS_EXPLANATIONS, report_failure, report_status
from .platforms import render_supported_products, unique_platforms
from .report import render_report

__all__ = [
    "SEPARATOR",
    "make_console",
    "render_diagnostics",
    "render_entry",
    "STATUS_EXPLANATIONS",
    "report_failure",
    "report_status",
    "render_supported_products",
    "unique_platforms",
    "render_report",
]

"""Outcome-driven rendering of a check report."""

import structlog
from rich.console import Console

from ..schemas import CheckReport, ValidationOutcome
from .console import outcome_line, separator
from .diagnostics import render_diagnostics
from .platforms import render_supported_products

logger = structlog.get_logger()


def render_report(console: Console, label: str, check_report: CheckReport) -> None:
    """
    Render the report for an answered validation request.

    Passed renders warnings, infos, then the platform summary (errors are
    never shown). Failed renders errors, warnings, then infos. Any other
    label renders only the separators.
    """
    report = check_report.validation_report
    outcome = ValidationOutcome.from_label(label)

    separator(console)
    if outcome is ValidationOutcome.PASSED:
        outcome_line(console, "Passed", "bold green")
        render_diagnostics(console, report.warnings, "warning")
        render_diagnostics(console, report.infos, "info")
        render_supported_products(console, check_report.supported_products)
    elif outcome is ValidationOutcome.FAILED:
        outcome_line(console, "Failed", "bold red")
        render_diagnostics(console, report.errors, "error")
        render_diagnostics(console, report.warnings, "warning")
        render_diagnostics(console, report.infos, "info")
    else:
        # The raw label still goes back to the caller.
        logger.warning("unrecognized_validation_result", result=label)
    separator(console)

"""Error reporter - fixed explanations for failed validation attempts."""

from rich.console import Console

from ..errors import StatusFailure, TransportFailure
from .console import emit, outcome_line, separator

STATUS_EXPLANATIONS = {
    400: "  Request body does not contain a valid XML document, and/or is too large (capped at 256kb).",
    415: "  Content-Type is not set to application/xml.",
    500: "  Unexpected error.",
    503: "  Service unavailable; API processing has been disabled via BRS.",
}


def report_status(console: Console, status_code: int) -> None:
    """Render the failure block for a non-200 response."""
    separator(console)
    outcome_line(console, "Failed", "bold red")
    emit(console, f"  Error Code: {status_code}")
    emit(console, "  ", ("Error(s): ", "bold red"))
    explanation = STATUS_EXPLANATIONS.get(status_code)
    if explanation is not None:
        emit(console, explanation)
    separator(console)


def _report_banner(console: Console, message: str) -> None:
    separator(console)
    emit(console, message)
    separator(console)


def report_failure(console: Console, failure: Exception) -> None:
    """
    Render the explanation for any failed validation attempt.

    Status failures get the status code block, transport failures the
    unreachable banner, and everything else the unexpected-error banner.
    """
    if isinstance(failure, StatusFailure):
        report_status(console, failure.status_code)
    elif isinstance(failure, TransportFailure):
        _report_banner(console, "Error: Cannot reach service.")
    else:
        _report_banner(console, "Error: Unexpected error.")

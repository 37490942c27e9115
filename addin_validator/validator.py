"""
Manifest validation entry point.

Submits a manifest to the validation service, renders the verdict to the
console, and returns the outcome label. No failure escapes: every error is
rendered and reported as "Error".
"""

import asyncio
from pathlib import Path

import structlog
from rich.console import Console

from .classifier import classify
from .errors import UnexpectedFailure, ValidationFailure
from .reporting import make_console, render_report, report_failure
from .reporting.console import emit
from .schemas import ValidationOutcome
from .tools import ValidationService, ValidationServiceClient

logger = structlog.get_logger()


async def validate_manifest(
    manifest_path: str | Path,
    *,
    service: ValidationService | None = None,
    console: Console | None = None,
) -> str:
    """
    Validate a manifest with the remote validation service.

    Args:
        manifest_path: Path to the manifest XML file
        service: Service used to submit the manifest (default: HTTP client
            with the default configuration)
        console: Sink for the rendered report (default: stdout)

    Returns:
        "Passed", "Failed", or "Error". A result label the service sends
        that is neither "Passed" nor "Failed" is returned unchanged.
    """
    service = service or ValidationServiceClient()
    console = console or make_console()

    try:
        emit(console, "Calling validation service. This might take a moment...")
        response = await service.submit(manifest_path)
        label, check_report = classify(response)
    except ValidationFailure as e:
        logger.info("manifest_validation_failed", kind=type(e).__name__, error=str(e))
        report_failure(console, e)
        return ValidationOutcome.ERROR.value
    except Exception as e:
        logger.error("manifest_validation_crashed", error=str(e), exc_info=True)
        report_failure(console, UnexpectedFailure(str(e)))
        return ValidationOutcome.ERROR.value

    try:
        render_report(console, label, check_report)
    except Exception as e:
        logger.error("report_rendering_failed", error=str(e), exc_info=True)
        report_failure(console, UnexpectedFailure(str(e)))
        return ValidationOutcome.ERROR.value

    logger.info("manifest_validation_complete", result=label)
    return label


def validate_manifest_sync(
    manifest_path: str | Path,
    *,
    service: ValidationService | None = None,
    console: Console | None = None,
) -> str:
    """Blocking wrapper around validate_manifest()."""
    return asyncio.run(
        validate_manifest(manifest_path, service=service, console=console)
    )

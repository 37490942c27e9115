"""Response classifier - turns a raw service response into a check report."""

import structlog

from .errors import StatusFailure
from .schemas import CheckReport, ServiceResponse, parse_check_report

logger = structlog.get_logger()


def classify(response: ServiceResponse) -> tuple[str, CheckReport]:
    """
    Classify a service response.

    Args:
        response: Raw response from the validation service

    Returns:
        (result label, parsed check report). The label is returned exactly as
        the service sent it.

    Raises:
        StatusFailure: If the status code is not 200
        ParseFailure: If the body is not a well-formed check report
    """
    if response.status_code != 200:
        logger.info("validation_status_failure", status_code=response.status_code)
        raise StatusFailure(response.status_code)

    check_report = parse_check_report(response.body)
    label = check_report.validation_report.result
    logger.info(
        "validation_response_classified",
        result=label,
        errors=len(check_report.validation_report.errors),
        warnings=len(check_report.validation_report.warnings),
        infos=len(check_report.validation_report.infos),
    )
    return label, check_report

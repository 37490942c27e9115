"""Failure taxonomy for manifest validation.

These never escape validate_manifest(); they are caught there and rendered
by the error reporter.
"""


class ValidationFailure(Exception):
    """Base class for every failure of a validation attempt."""


class TransportFailure(ValidationFailure):
    """The validation service could not be reached."""


class StatusFailure(ValidationFailure):
    """The service answered with a status code other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"Validation service returned status {status_code}")
        self.status_code = status_code


class ParseFailure(ValidationFailure):
    """A 200 response whose body is not a well-formed check report."""


class UnexpectedFailure(ValidationFailure):
    """Anything not covered by the other failure kinds."""

"""ValidationOutcome - the three-way verdict of one validation call."""

from enum import Enum


class ValidationOutcome(str, Enum):
    """Outcome label returned to the caller."""

    PASSED = "Passed"
    FAILED = "Failed"
    ERROR = "Error"

    @classmethod
    def from_label(cls, label: str) -> "ValidationOutcome | None":
        """Map a service result label to an outcome.

        Only the exact, case-sensitive labels "Passed" and "Failed" are
        recognized. "Error" is never reported by the service itself.
        """
        if label == cls.PASSED.value:
            return cls.PASSED
        if label == cls.FAILED.value:
            return cls.FAILED
        return None

"""Errors raised when a tested scenario is converted into an exception."""

from collections.abc import Sequence


class ScenarioFailedError(Exception):
    """Base class for the single error raised for a failed scenario."""


class SetupFailedError(ScenarioFailedError):
    """Raised when a given action failed."""

    def __init__(self, failure: Exception) -> None:
        super().__init__(f"Given action failed: {failure!r}")
        self.failure = failure


class UncheckedTriggerFailureError(ScenarioFailedError):
    """Raised when the when action failed and no exception check was declared."""

    def __init__(self, failure: Exception) -> None:
        super().__init__(f"Unchecked exception in when action: {failure!r}")
        self.failure = failure


class ValidatedTriggerFailureRejectedError(ScenarioFailedError):
    """Raised when exception checks rejected the when action failure."""

    def __init__(
        self, failure: Exception, failed_checks: Sequence[Exception]
    ) -> None:
        super().__init__(
            f"{len(failed_checks)} exception check(s) rejected {failure!r}"
        )
        self.failure = failure
        self.failed_checks = failed_checks


class AssertionsFailedError(ScenarioFailedError):
    """Raised when one or more then assertions failed."""

    def __init__(self, failures: Sequence[Exception]) -> None:
        details = "; ".join(repr(failure) for failure in failures)
        super().__init__(f"{len(failures)} assertion(s) failed: {details}")
        self.failures = failures

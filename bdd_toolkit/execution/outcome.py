"""Classification of captured failures into a single scenario outcome."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import override

from bdd_toolkit.execution.errors import (
    AssertionsFailedError,
    ScenarioFailedError,
    SetupFailedError,
    UncheckedTriggerFailureError,
    ValidatedTriggerFailureRejectedError,
)
from bdd_toolkit.models.result import ResultSet, TestStatus


@dataclass(frozen=True)
class Passed:
    """No failure applies."""


class FailedOutcome(ABC):
    """Outcome of a scenario that did not pass."""

    @property
    @abstractmethod
    def cause(self) -> Exception | None:
        """Captured failure the raised error is chained to, if a single one."""

    @abstractmethod
    def to_error(self) -> ScenarioFailedError:
        """Build the error reporting this outcome."""


@dataclass(frozen=True, kw_only=True)
class SetupFailed(FailedOutcome):
    """A given action failed."""

    failure: Exception

    @property
    @override
    def cause(self) -> Exception | None:
        return self.failure

    @override
    def to_error(self) -> ScenarioFailedError:
        return SetupFailedError(self.failure)


@dataclass(frozen=True, kw_only=True)
class UncheckedTriggerFailure(FailedOutcome):
    """The when action failed and nothing was declared to check the failure."""

    failure: Exception

    @property
    @override
    def cause(self) -> Exception | None:
        return self.failure

    @override
    def to_error(self) -> ScenarioFailedError:
        return UncheckedTriggerFailureError(self.failure)


@dataclass(frozen=True, kw_only=True)
class ValidatedTriggerFailureRejected(FailedOutcome):
    """The when action failed and at least one exception check rejected it."""

    failure: Exception
    failed_checks: Sequence[Exception]

    @property
    @override
    def cause(self) -> Exception | None:
        return self.failure

    @override
    def to_error(self) -> ScenarioFailedError:
        return ValidatedTriggerFailureRejectedError(self.failure, self.failed_checks)


@dataclass(frozen=True, kw_only=True)
class AssertionsFailed(FailedOutcome):
    """The when action succeeded but then assertions failed."""

    failures: Sequence[Exception]

    @property
    @override
    def cause(self) -> Exception | None:
        return None

    @override
    def to_error(self) -> ScenarioFailedError:
        return AssertionsFailedError(self.failures)


type Failure = (
    SetupFailed
    | UncheckedTriggerFailure
    | ValidatedTriggerFailureRejected
    | AssertionsFailed
)
type Outcome = Passed | Failure


def classify(results: ResultSet) -> Outcome:
    """Map captured failures to exactly one outcome.

    The first matching rule wins: setup failure, unchecked when failure,
    rejected when failure, failed assertions. A when failure accepted by every
    declared exception check is a pass.
    """
    if results.failure_from_setup is not None:
        return SetupFailed(failure=results.failure_from_setup)

    trigger_failure = results.failure_from_trigger
    failed_checks = tuple(results.failed_exception_checks)
    if trigger_failure is not None:
        if not failed_checks and not results.exception_checks_configured:
            return UncheckedTriggerFailure(failure=trigger_failure)
        if failed_checks:
            return ValidatedTriggerFailureRejected(
                failure=trigger_failure, failed_checks=failed_checks
            )

    if results.failed_assertions:
        return AssertionsFailed(failures=tuple(results.failed_assertions))

    return Passed()


def status_of(outcome: Outcome) -> TestStatus:
    """Derive the publication status of an outcome."""
    return "passed" if isinstance(outcome, Passed) else "failed"

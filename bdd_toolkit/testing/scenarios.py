"""Scenario definitions built from mock steps, with call tracking."""

from dataclasses import dataclass, field
from unittest.mock import Mock

from bdd_toolkit.execution.definition import ScenarioDefinition
from bdd_toolkit.steps import ExceptionCheck, GivenAction, ThenAssertion, WhenAction


def _step() -> Mock:
    return Mock(return_value=None)


@dataclass(kw_only=True)
class MockSteps:
    """Two given actions, a when action, two exception checks and two thens.

    Each step body is a `Mock`, so tests make a step fail through
    `side_effect` and inspect whether it was called.
    """

    first_given: Mock = field(default_factory=_step)
    second_given: Mock = field(default_factory=_step)
    when: Mock = field(default_factory=_step)
    first_exception_check: Mock = field(default_factory=_step)
    second_exception_check: Mock = field(default_factory=_step)
    first_then: Mock = field(default_factory=_step)
    second_then: Mock = field(default_factory=_step)

    def with_results_check(self) -> ScenarioDefinition:
        """Scenario verifying the outcome through then assertions."""
        return ScenarioDefinition(
            title="Results check",
            feature="Mock feature",
            given=self._given(),
            when=WhenAction(description="action runs", action=self.when),
            then=(
                ThenAssertion(description="first result", assertion=self.first_then),
                ThenAssertion(description="second result", assertion=self.second_then),
            ),
        )

    def with_results_and_exception_check(self) -> ScenarioDefinition:
        """Scenario also declaring exception checks for the when action."""
        return ScenarioDefinition(
            title="Results and exception check",
            feature="Mock feature",
            given=self._given(),
            when=WhenAction(description="action runs", action=self.when),
            exception_checks=(
                ExceptionCheck(
                    description="first exception", check=self.first_exception_check
                ),
                ExceptionCheck(
                    description="second exception", check=self.second_exception_check
                ),
            ),
            then=(
                ThenAssertion(description="first result", assertion=self.first_then),
                ThenAssertion(description="second result", assertion=self.second_then),
            ),
        )

    def _given(self) -> tuple[GivenAction, ...]:
        return (
            GivenAction(description="first precondition", action=self.first_given),
            GivenAction(description="second precondition", action=self.second_given),
        )

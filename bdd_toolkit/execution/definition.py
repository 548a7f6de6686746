"""Executable scenario definition."""

from collections.abc import Sequence
from dataclasses import dataclass

from bdd_toolkit.models.scenario import Scenario, StepDoc
from bdd_toolkit.steps import ExceptionCheck, GivenAction, ThenAssertion, WhenAction


@dataclass(frozen=True, kw_only=True)
class ScenarioDefinition:
    """Steps of a scenario in declaration order, ready to be run."""

    title: str
    when: WhenAction
    feature: str | None = None
    given: Sequence[GivenAction] = ()
    exception_checks: Sequence[ExceptionCheck] = ()
    then: Sequence[ThenAssertion] = ()

    def describe(self) -> Scenario:
        """Build the documentation metadata for this scenario."""
        steps = [
            *(StepDoc(kind="given", description=s.description) for s in self.given),
            StepDoc(kind="when", description=self.when.description),
            *(
                StepDoc(kind="exception_check", description=s.description)
                for s in self.exception_checks
            ),
            *(StepDoc(kind="then", description=s.description) for s in self.then),
        ]
        return Scenario(title=self.title, feature=self.feature, steps=tuple(steps))

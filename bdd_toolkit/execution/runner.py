"""Scenario runner executing steps phase by phase."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bdd_toolkit.execution.definition import ScenarioDefinition
from bdd_toolkit.execution.tested_scenario import TestedScenario
from bdd_toolkit.models.result import ResultSet
from bdd_toolkit.steps import ExceptionCheck, GivenAction, ThenAssertion, WhenAction

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ScenarioRunner:
    """Runs a single scenario and captures failures of its steps.

    Step failures never escape `run`; they are recorded in the result set of
    the returned tested scenario.
    """

    def run(self, definition: ScenarioDefinition) -> TestedScenario:
        """Run all steps of the scenario in phase order.

        Args:
            definition: Scenario steps to execute

        Returns:
            Tested scenario pairing the scenario metadata with its results

        """
        scenario = definition.describe()
        results = ResultSet(
            exception_checks_configured=bool(definition.exception_checks)
        )
        log.debug("Running scenario %r", scenario.title)

        if self._run_given(definition.given, results):
            failure = self._run_when(definition.when, results)
            if failure is None:
                self._run_then(definition.then, results)
            elif definition.exception_checks:
                self._run_exception_checks(
                    definition.exception_checks, failure, results
                )

        tested_scenario = TestedScenario(scenario=scenario, results=results)
        log.info(
            "Scenario %r finished: status=%s", scenario.title, tested_scenario.status
        )
        return tested_scenario

    def _run_given(self, given: Sequence[GivenAction], results: ResultSet) -> bool:
        """Run given actions until the first failure."""
        for step in given:
            log.debug("Given %s", step.description)
            try:
                step.action()
            except Exception as exc:
                log.warning("Given action %r failed: %s", step.description, exc)
                results.failure_from_setup = exc
                return False
        return True

    def _run_when(self, when: WhenAction, results: ResultSet) -> Exception | None:
        """Run the when action, returning its failure if it raised."""
        log.debug("When %s", when.description)
        try:
            when.action()
        except Exception as exc:
            log.warning("When action %r failed: %s", when.description, exc)
            results.failure_from_trigger = exc
            return exc
        return None

    def _run_exception_checks(
        self,
        checks: Sequence[ExceptionCheck],
        failure: Exception,
        results: ResultSet,
    ) -> None:
        """Run every exception check against the when action failure."""
        for step in checks:
            log.debug("Exception check %s", step.description)
            try:
                step.check(failure)
            except Exception as exc:
                log.warning("Exception check %r failed: %s", step.description, exc)
                results.failed_exception_checks.append(exc)

    def _run_then(self, then: Sequence[ThenAssertion], results: ResultSet) -> None:
        """Run every then assertion, keeping all failures."""
        for step in then:
            log.debug("Then %s", step.description)
            try:
                step.assertion()
            except Exception as exc:
                log.warning("Assertion %r failed: %s", step.description, exc)
                results.failed_assertions.append(exc)

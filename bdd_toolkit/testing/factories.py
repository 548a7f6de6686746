"""Test factories for generating scenario metadata."""

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from bdd_toolkit.models.scenario import Scenario, StepDoc


class StepDocFactory(ModelFactory[StepDoc]):
    """Factory for StepDoc."""


class ScenarioFactory(ModelFactory[Scenario]):
    """Factory for Scenario."""

    steps = Use(StepDocFactory.batch, size=3)

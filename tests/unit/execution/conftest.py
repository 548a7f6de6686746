"""Fixtures for execution tests."""

import pytest

from bdd_toolkit.execution.runner import ScenarioRunner
from bdd_toolkit.testing.scenarios import MockSteps


@pytest.fixture
def steps() -> MockSteps:
    """Create mock steps that all succeed."""
    return MockSteps()


@pytest.fixture
def runner() -> ScenarioRunner:
    """Create scenario runner."""
    return ScenarioRunner()

"""Documentation publisher keeping published scenarios in memory."""

import asyncio
import logging
from dataclasses import dataclass, field

from bdd_toolkit.docs.base import DocPublisher
from bdd_toolkit.models.result import TestStatus
from bdd_toolkit.models.scenario import Scenario

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PublishedScenario:
    """Entry appended to the in-memory documentation."""

    scenario: Scenario
    status: TestStatus


@dataclass(frozen=True, kw_only=True)
class InMemoryDocPublisher(DocPublisher):
    """Publisher collecting entries in append order."""

    entries: list[PublishedScenario] = field(default_factory=list)

    async def append(
        self,
        scenario: Scenario,
        status: TestStatus,
        cancellation: asyncio.Event | None = None,
    ) -> None:
        """Record the scenario unless cancellation was requested."""
        if cancellation is not None and cancellation.is_set():
            log.info("Skipping cancelled append of %r", scenario.title)
            return
        self.entries.append(PublishedScenario(scenario=scenario, status=status))

"""Abstract base class for scenario documentation publishers."""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass

from bdd_toolkit.models.result import TestStatus
from bdd_toolkit.models.scenario import Scenario


@dataclass(frozen=True, kw_only=True)
class DocPublisher(ABC):
    """Sink receiving tested scenarios for documentation."""

    @abstractmethod
    async def append(
        self,
        scenario: Scenario,
        status: TestStatus,
        cancellation: asyncio.Event | None = None,
    ) -> None:
        """Append a tested scenario to the documentation.

        Args:
            scenario: Scenario metadata, must not be modified
            status: Status of the tested scenario
            cancellation: Event set when the caller gives up on the append

        """

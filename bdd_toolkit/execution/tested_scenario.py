"""Tested scenario pairing scenario metadata with captured failures."""

import asyncio
import logging
from dataclasses import dataclass, field

from bdd_toolkit.docs.base import DocPublisher
from bdd_toolkit.execution.outcome import Outcome, Passed, classify, status_of
from bdd_toolkit.models.result import ResultSet, TestStatus
from bdd_toolkit.models.scenario import Scenario

log = logging.getLogger(__name__)


class ScenarioAlreadyPublishedError(Exception):
    """Raised when a tested scenario is published a second time."""


class PublicationCancelledError(Exception):
    """Raised when publication is cancelled before the publisher completed."""


@dataclass(frozen=True, kw_only=True)
class TestedScenario:
    """Outcome of running a scenario.

    Classification is recomputed from the results on every access and always
    refers to the captured failure instances themselves.
    """

    __test__ = False

    scenario: Scenario
    results: ResultSet
    _publications: list[DocPublisher] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @property
    def outcome(self) -> Outcome:
        """Single outcome classifying the captured failures."""
        return classify(self.results)

    @property
    def status(self) -> TestStatus:
        """Publication status derived from the outcome."""
        return status_of(self.outcome)

    def raise_on_errors(self) -> None:
        """Raise the error matching the outcome, if the scenario did not pass.

        Raises:
            ScenarioFailedError: Subclass matching the failed phase

        """
        outcome = self.outcome
        if isinstance(outcome, Passed):
            return
        raise outcome.to_error() from outcome.cause

    async def publish(
        self,
        publisher: DocPublisher,
        cancellation: asyncio.Event | None = None,
    ) -> None:
        """Append the scenario and its status to the publisher exactly once.

        Args:
            publisher: Documentation sink
            cancellation: Event that aborts the publication when set

        Raises:
            ScenarioAlreadyPublishedError: If the scenario was published before
            PublicationCancelledError: If cancellation was requested

        """
        if self._publications:
            raise ScenarioAlreadyPublishedError(
                f"Scenario {self.scenario.title!r} was already published"
            )
        self._publications.append(publisher)

        if cancellation is not None and cancellation.is_set():
            raise PublicationCancelledError(
                f"Publication of {self.scenario.title!r} cancelled before start"
            )

        status = self.status
        log.info("Publishing scenario %r with status=%s", self.scenario.title, status)
        if cancellation is None:
            await publisher.append(self.scenario, status, cancellation)
            return

        append = asyncio.ensure_future(
            publisher.append(self.scenario, status, cancellation)
        )

        cancelled = asyncio.ensure_future(cancellation.wait())
        try:
            await asyncio.wait(
                {append, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            append.cancel()
            raise
        finally:
            cancelled.cancel()

        if append.done():
            append.result()
            return

        append.cancel()
        await asyncio.wait({append})
        if not append.cancelled():
            append.exception()
        log.info("Publication of scenario %r cancelled", self.scenario.title)
        raise PublicationCancelledError(
            f"Publication of {self.scenario.title!r} cancelled"
        )

"""Models for failures captured while executing a scenario."""

from dataclasses import dataclass, field
from typing import Literal

type TestStatus = Literal["passed", "failed"]


@dataclass(kw_only=True)
class ResultSet:
    """Failures captured during one scenario execution.

    Owned by a single run. The single-valued fields are written at most once;
    the lists keep every failure in step declaration order.
    """

    __test__ = False

    exception_checks_configured: bool = False
    failure_from_setup: Exception | None = None
    failure_from_trigger: Exception | None = None
    failed_exception_checks: list[Exception] = field(default_factory=list)
    failed_assertions: list[Exception] = field(default_factory=list)

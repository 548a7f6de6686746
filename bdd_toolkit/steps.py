"""Role-tagged units of work making up a scenario."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GivenAction:
    """Setup action establishing a precondition."""

    description: str
    action: Callable[[], object]


@dataclass(frozen=True, kw_only=True)
class WhenAction:
    """The single action under test."""

    description: str
    action: Callable[[], object]


@dataclass(frozen=True, kw_only=True)
class ExceptionCheck:
    """Validator for the failure raised by the when action.

    The check receives the captured failure and raises if it is not the
    expected one.
    """

    description: str
    check: Callable[[Exception], object]


@dataclass(frozen=True, kw_only=True)
class ThenAssertion:
    """Postcondition verified after a successful when action."""

    description: str
    assertion: Callable[[], object]

"""Models describing what a scenario tested, used for documentation only."""

from collections.abc import Sequence
from typing import Literal

from pydantic import Field

from bdd_toolkit.models.base import Model

type StepKind = Literal["given", "when", "exception_check", "then"]


class StepDoc(Model):
    """Description of a single scenario step."""

    kind: StepKind = Field(..., description="Role of the step in the scenario")
    description: str = Field(..., description="Human-readable step description")


class Scenario(Model):
    """Immutable scenario metadata handed to documentation publishers."""

    title: str = Field(..., description="Scenario title")
    feature: str | None = Field(
        default=None, description="Feature the scenario belongs to"
    )
    steps: Sequence[StepDoc] = Field(
        default_factory=tuple, description="Steps in declaration order"
    )

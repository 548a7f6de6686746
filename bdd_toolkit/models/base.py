"""Base model configuration for scenario documentation structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable base model shared by documentation models."""

    model_config = ConfigDict(frozen=True, extra="forbid")

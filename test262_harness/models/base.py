"""Base model configuration for parsed metadata."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that ignores keys it does not declare."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

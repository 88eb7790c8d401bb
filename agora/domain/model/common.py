"""Shared base for entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model. Changes go through ``model_copy(update=...)``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

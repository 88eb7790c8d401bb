"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable, compared field by field."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, exposed as ``.root``."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)

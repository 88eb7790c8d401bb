"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory twin for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in the application container.

    A component base sets ``__mock_component__`` and gets two subclasses,
    the production implementation and an in-memory one flagged with
    ``__is_mock__ = True``. A provider without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

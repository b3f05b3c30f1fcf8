"""Provider metadata shared by production and test wiring."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-process doubles
Component = Literal["persistence", "cache", "queue", "storage", "realtime"]


class ProviderBase(Provider):
    """Dishka provider tagged with the component it implements.

    A base class with ``__mock_component__`` set has one production subclass
    and one subclass flagged ``__is_mock__``; ``get_provider`` picks between
    them. Providers without a component are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

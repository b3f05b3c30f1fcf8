"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base error for configuration and wiring problems."""


class ConfigurationError(UtilError):
    """A setting holds a value the application cannot run with."""


class DependencyInjectionError(UtilError):
    """A provider could not be resolved for a component."""

    def __init__(self, component: str, kind: str):
        self.component = component
        self.kind = kind
        super().__init__(f"No {kind} implementation for {component}")

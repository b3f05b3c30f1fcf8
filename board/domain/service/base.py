"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the board's rules that don't belong to a single
    entity: threading, sanitizing, caching policy, captcha checks.
    """

    pass

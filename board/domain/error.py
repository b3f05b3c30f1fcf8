"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input rejected by a domain rule (bad parent, empty body, bad upload)."""

    pass


class IntegrityError(DomainError):
    """Stored data violates an invariant, e.g. a comment without its author."""

    def __init__(self, entity: str, entity_id: str, message: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id}: {message}")


class StoreUnavailableError(DomainError):
    """The entity store could not be reached or timed out."""

    pass


class CacheUnavailableError(DomainError):
    """The cache backend could not be reached or answered with garbage."""

    pass


class SideEffectError(DomainError):
    """A best-effort notification (broadcast or queue publish) failed."""

    pass

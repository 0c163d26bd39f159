"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input (bad length, bad enum value, unparsable URL)."""

    pass


class InvalidStatusTransitionError(ValidationError):
    """Raised when a moderation status change is not allowed."""

    def __init__(self, kind: str, current: str, target: str):
        self.kind = kind
        self.current = current
        self.target = target
        super().__init__(f"Cannot change {kind} status from {current} to {target}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found (or not visible)."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Policy rejection, e.g. commenting without having voted."""

    pass


class ConflictError(DomainError):
    """Unique constraint hit by a concurrent duplicate insert.

    Raised by repositories at the storage boundary. Services convert it into
    the equivalent idempotent outcome wherever the operation allows it.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")

"""Domain exceptions."""


class PmGuardError(Exception):
    """Base exception for pmguard."""

    pass


class PermissionDenied(PmGuardError):
    """User does not have permission for the requested action."""

    pass


class NotFound(PmGuardError):
    """Requested record was not found."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class ValidationError(PmGuardError):
    """Validation failed for input data."""

    pass

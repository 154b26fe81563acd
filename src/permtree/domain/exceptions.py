"""Domain exceptions."""


class PermTreeError(Exception):
    """Base exception for permtree."""

    pass


class PermissionDenied(PermTreeError):
    """Member does not have permission for the requested action."""

    pass


class NotFound(PermTreeError):
    """Requested entity was not found."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class DataAccessError(PermTreeError):
    """Underlying store failed - the permission decision could not be made."""

    pass


class ValidationError(PermTreeError):
    """Validation failed for input data."""

    pass

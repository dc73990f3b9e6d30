"""
Domain exceptions.

The HTTP layer maps each class to a status code; see
``tree_planner.middleware.error_handler``.
"""


class PlannerError(Exception):
    """Base class for all planner errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(PlannerError):
    """Caller-supplied values are malformed or out of range."""
    pass


class NotFoundError(PlannerError):
    """A referenced entity does not exist."""
    pass


class BarangayNotFoundError(NotFoundError):
    """No barangay matches the lookup."""
    pass


class CatalogUnavailableError(PlannerError):
    """The catalog backend failed or returned unusable data."""
    pass

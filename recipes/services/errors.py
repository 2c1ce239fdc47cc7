"""Errors raised by the step ordering services."""


class StepOrderingError(Exception):
    """Base class for step ordering failures."""


class ValidationRejected(StepOrderingError):
    """A dependency edit would break the earlier-step rule."""

    def __init__(self, message, blocking=()):
        super().__init__(message)
        self.blocking = tuple(blocking)


class StepNotFound(StepOrderingError, LookupError):
    """No step of the recipe holds the referenced position."""

    def __init__(self, position, recipe_id=None):
        super().__init__(f"Step {position} does not exist")
        self.position = position
        self.recipe_id = recipe_id


class StoreFailure(StepOrderingError):
    """The database rejected a write; the whole operation was rolled back."""

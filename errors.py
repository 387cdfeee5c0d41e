"""
Recipe Book Errors

Exception hierarchy shared by the store, the seeder and the query services.
"""


class RecipeBookError(Exception):
    """Base class for all recipe book failures."""
    pass


class BootstrapLoadError(RecipeBookError):
    """Raised when a bootstrap payload cannot be fetched or decoded."""
    pass


class SeedingError(RecipeBookError):
    """Raised when bootstrap records cannot be written to the store."""
    pass


class SchemaVersionError(RecipeBookError):
    """Raised when the store is opened at an older or undeclared version."""
    pass


class StoreClosedError(RecipeBookError):
    """Raised when a closed (or reset) store is used."""
    pass


class UnknownViewError(RecipeBookError):
    """Raised when switching to a view that does not exist."""
    pass


class InsufficientCandidatesError(RecipeBookError):
    """Raised when fewer meals remain than the number of alternates requested."""

    def __init__(self, available, requested):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Only {available} meal(s) available, {requested} requested"
        )

"""
Exception hierarchy for ralanova.

All exceptions inherit from RalAnovaError to allow catching any
library-specific error.

The numeric core (special functions, descriptive statistics, distribution
approximations, the table orchestrator) never raises: undefined results
propagate as NaN or None. These exceptions belong to the input layer only,
where a malformed configuration is a caller mistake rather than a
degenerate statistic.
"""


class RalAnovaError(Exception):
    """Base exception for all ralanova errors."""
    pass


class ValidationError(RalAnovaError):
    """
    Input validation failed.

    Raised when a configuration or dimension argument fails validation.
    """
    pass


class DimensionError(ValidationError):
    """
    Dataset dimensions are invalid.

    Attributes:
        name: Name of the offending dimension ('treatments', 'replications', ...)
        value: The value that was rejected
        minimum: Smallest accepted value, if applicable
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: object = None,
        minimum: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value
        self.minimum = minimum

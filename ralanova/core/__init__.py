"""
Core infrastructure for ralanova.

Shared abstractions used by the domain sub-packages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy (input layer only)
    validation: Input validators
"""

from ralanova.core.result import Result
from ralanova.core.exceptions import (
    RalAnovaError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "RalAnovaError",
    "ValidationError",
    "DimensionError",
]

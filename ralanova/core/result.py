"""
Generic result container for ralanova computations.

The Result class is the envelope every solver returns. Domain modules define
their own parameter payloads and wrap them here together with timing,
metadata and non-fatal warnings.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (design type, table count)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so repeated analyses can be compared
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Domain-specific payload (per-table ANOVA results, ...)
        info: Structured metadata
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=RALParams(tables=(...)),
        ...     info={'design_type': 'crd', 'n_tables': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

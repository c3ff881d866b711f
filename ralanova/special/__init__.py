"""
Special functions.

Public API:
    gamma(z)    - Lanczos approximation (g=7) with reflection
    beta(a, b)  - Gamma(a) Gamma(b) / Gamma(a + b)
"""

from ralanova.special._gamma import (
    LANCZOS_BASE,
    LANCZOS_COEFFICIENTS,
    LANCZOS_G,
    beta,
    gamma,
)

__all__ = [
    "gamma",
    "beta",
    "LANCZOS_G",
    "LANCZOS_BASE",
    "LANCZOS_COEFFICIENTS",
]

"""
ralanova: one-way ANOVA for Completely Randomized Designs (RAL).

Analyzes one or more independent tables of replicated treatment
measurements: treatment means, F statistic, approximate p-value and
approximate critical F values.

Submodules:
    anova: Table orchestrator, input model, solution/export
    distributions: Closed-form F distribution approximations
    special: Gamma and beta functions
    descriptive: Sums of squares and means
"""

__version__ = "0.1.0"

from ralanova import anova
from ralanova import descriptive
from ralanova import distributions
from ralanova import special
from ralanova.anova import anova_crd, calculate_ral

__all__ = [
    "__version__",
    "anova",
    "descriptive",
    "distributions",
    "special",
    "anova_crd",
    "calculate_ral",
]

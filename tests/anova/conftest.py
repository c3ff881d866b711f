"""
Shared fixtures for CRD (RAL) tests.
"""

import pytest


@pytest.fixture
def two_by_two():
    """T=2, R=2: means (2, 3), grand mean 2.5, SS_trt 1, SS_err 4, F 0.5."""
    return [[1, 2], [3, 4]]


@pytest.fixture
def three_by_four():
    """T=3, R=4 with clear treatment differences, F = 33.444..."""
    return [
        [10, 12, 15],
        [11, 13, 16],
        [9, 12, 14],
        [10, 14, 15],
    ]


@pytest.fixture
def constant_table():
    """All observations equal: no treatment or error variation."""
    return [[5, 5, 5], [5, 5, 5], [5, 5, 5]]


@pytest.fixture
def ral_config(three_by_four):
    """Mapping with the recognized configuration fields."""
    return {
        'treatments': 3,
        'replications': 4,
        'tables': 1,
        'data': [three_by_four],
    }

"""Shared pytest fixtures for the region engine test suite.

Provides:
- triangle_rows: x >= 0, y >= 0, x + y <= 1
- square_rows: 0 <= x <= 1, 0 <= y <= 1 (bounds written explicitly)
- quadrant_rows: x >= 0, y >= 0 only
- strip_rows: x >= 0, 0 <= y <= 1 (unbounded to the right)
"""

import pytest

from src.engine.region.primitives import ConstraintRow


@pytest.fixture()
def triangle_rows() -> list[ConstraintRow]:
    return [ConstraintRow(1, 1, 1)]


@pytest.fixture()
def square_rows() -> list[ConstraintRow]:
    return [
        ConstraintRow(1, 0, 1),
        ConstraintRow(0, 1, 1),
        ConstraintRow(-1, 0, 0),
        ConstraintRow(0, -1, 0),
    ]


@pytest.fixture()
def quadrant_rows() -> list[ConstraintRow]:
    return [
        ConstraintRow(-1, 0, 0),
        ConstraintRow(0, -1, 0),
    ]


@pytest.fixture()
def strip_rows() -> list[ConstraintRow]:
    return [ConstraintRow(0, 1, 1)]

"""Constraint system normalizer.

Dictionary-form LPs assume x >= 0 and y >= 0 implicitly. The geometry needs
them as explicit rows, plus one large synthetic ``x + y <= U`` row so that an
unbounded region still has finite corners to draw.
"""

import logging
from collections.abc import Iterable
from fractions import Fraction

from src.engine.region.primitives import ConstraintRow, ConstraintSystem

logger = logging.getLogger(__name__)

LOWER_BOUND_X = ConstraintRow(-1, 0, 0)
LOWER_BOUND_Y = ConstraintRow(0, -1, 0)


def is_lower_bound_x(row: ConstraintRow) -> bool:
    """True for rows equivalent to ``-x <= 0`` (any positive scaling)."""
    return row.a < 0 and row.b == 0 and row.c == 0


def is_lower_bound_y(row: ConstraintRow) -> bool:
    """True for rows equivalent to ``-y <= 0`` (any positive scaling)."""
    return row.a == 0 and row.b < 0 and row.c == 0


def synthetic_bound(rows: Iterable[ConstraintRow]) -> ConstraintRow:
    """Build ``x + y <= (S + 2) * S`` where S is the sum of |c| over rows.

    U exceeds the coordinate sum of every finite vertex, so the row only
    cuts away the parts of the region that extend to infinity.
    """
    total = sum((abs(row.c) for row in rows), start=Fraction(0))
    return ConstraintRow(1, 1, (total + 2) * total)


def normalize_constraints(
    rows: ConstraintSystem | Iterable[ConstraintRow],
) -> ConstraintSystem:
    """Return an equivalent system with explicit lower bounds and a synthetic bound.

    Original rows are kept verbatim and in order; missing ``-x <= 0`` and
    ``-y <= 0`` rows are appended, then the synthetic bound as the last row.

    Raises:
        ValueError: If the input already carries a synthetic bound.
    """
    if isinstance(rows, ConstraintSystem):
        if rows.has_synthetic_bound:
            raise ValueError("constraint system is already normalized.")
        rows = rows.rows

    original = tuple(rows)
    has_lower_x = any(is_lower_bound_x(row) for row in original)
    has_lower_y = any(is_lower_bound_y(row) for row in original)

    normalized = list(original)
    if not has_lower_x:
        normalized.append(LOWER_BOUND_X)
    if not has_lower_y:
        normalized.append(LOWER_BOUND_Y)

    bound = synthetic_bound(original)
    normalized.append(bound)

    logger.debug(
        "Normalized %d rows: lower_x_added=%s lower_y_added=%s bound=%s",
        len(original), not has_lower_x, not has_lower_y, bound.c,
    )
    return ConstraintSystem(rows=tuple(normalized), has_synthetic_bound=True)

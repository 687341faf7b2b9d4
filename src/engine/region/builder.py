"""Feasible-region pipeline.

Pipeline:
1. normalize_constraints() → explicit lower bounds + synthetic bound
2. find_feasible_intersections() → vertex set + unbounded markers
3. order_convex_boundary() → drawable polygon walk
4. classify_unbounded() → fill strategy + fade target
5. Package everything into RegionGeometry

This is DETERMINISTIC. An empty feasible region is a valid result, not an
error.
"""

import logging
from collections.abc import Iterable, Sequence

from src.config.settings import FloatPrecision
from src.engine.region.intersections import (
    classify_unbounded,
    find_feasible_intersections,
)
from src.engine.region.normalizer import normalize_constraints
from src.engine.region.ordering import order_convex_boundary
from src.engine.region.primitives import (
    ConstraintRow,
    ConstraintSystem,
    RegionGeometry,
)

logger = logging.getLogger(__name__)


def _as_rows(
    rows: ConstraintSystem | Iterable[ConstraintRow | Sequence],
) -> ConstraintSystem | list[ConstraintRow]:
    if isinstance(rows, ConstraintSystem):
        return rows
    return [
        row if isinstance(row, ConstraintRow) else ConstraintRow.from_sequence(row)
        for row in rows
    ]


def compute_region(
    rows: ConstraintSystem | Iterable[ConstraintRow | Sequence],
    *,
    precision: FloatPrecision = FloatPrecision.SINGLE,
) -> RegionGeometry:
    """Compute the drawable feasible region of ``a*x + b*y <= c`` rows.

    Args:
        rows: Constraint rows, as ConstraintRow objects or ``(a, b, c)``
            sequences of exact-convertible numbers.
        precision: Float width for the vertex feasibility test.

    Returns:
        RegionGeometry with the normalized rows (synthetic bound excluded),
        the vertex set, its ordered boundary and the unbounded markers.

    Raises:
        ValueError: If a row does not have exactly three entries or holds a
            non-finite number.
    """
    system = normalize_constraints(_as_rows(rows))
    intersections = find_feasible_intersections(system, precision)
    boundary = order_convex_boundary(intersections.vertices)
    fill_strategy, fade_target = classify_unbounded(intersections.unbounded_markers)

    if not intersections.vertices:
        logger.info("Feasible region is empty (%d constraint rows)", len(system))

    return RegionGeometry(
        constraint_rows=system.visible_rows,
        vertices=intersections.vertices,
        boundary=boundary,
        unbounded_markers=intersections.unbounded_markers,
        fill_strategy=fill_strategy,
        fade_target=fade_target,
    )

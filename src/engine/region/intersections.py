"""Exact pairwise intersection solver and unbounded-direction classifier.

Every ordered pair of distinct constraint lines is solved as a 2x2 linear
system in sympy rational arithmetic, so near-parallel lines never produce
spurious vertices from float cancellation. Only the feasibility test
downstream is done in floating point.

Intersections between the synthetic ``x + y <= U`` row (always the last row
of a normalized system) and another row mark directions in which the true
region is unbounded. They are returned explicitly next to the vertex set.
"""

import logging
from fractions import Fraction

import sympy as sp

from src.config.settings import FloatPrecision
from src.engine.region.feasibility import constraint_arrays, is_feasible
from src.engine.region.primitives import (
    ConstraintRow,
    ConstraintSystem,
    FillStrategy,
    IntersectionResult,
    Point,
)

logger = logging.getLogger(__name__)


def _rational(value: Fraction) -> sp.Rational:
    return sp.Rational(value.numerator, value.denominator)


def _fraction(value: sp.Expr) -> Fraction:
    value = sp.Rational(value)
    return Fraction(int(value.p), int(value.q))


def solve_2x2(
    first: ConstraintRow,
    second: ConstraintRow,
) -> tuple[Fraction, Fraction] | None:
    """Intersect the lines ``a*x + b*y = c`` of two rows.

    The 2x2 system is built as a sympy Matrix of Rationals and LU-solved.

    Returns:
        Exact (x, y), or None when the lines are parallel or coincident
        (singular system).
    """
    A = sp.Matrix([
        [_rational(first.a), _rational(first.b)],
        [_rational(second.a), _rational(second.b)],
    ])
    if A.det() == 0 or A.rank() < 2:
        return None

    b = sp.Matrix([_rational(first.c), _rational(second.c)])
    solution = A.LUsolve(b)
    return _fraction(solution[0]), _fraction(solution[1])


def find_feasible_intersections(
    system: ConstraintSystem,
    precision: FloatPrecision = FloatPrecision.SINGLE,
) -> IntersectionResult:
    """Return every feasible pairwise intersection of a constraint system.

    Args:
        system: Constraint rows; when ``has_synthetic_bound`` is set the last
            row is treated as the synthetic bound.
        precision: Float width for the feasibility test.

    Returns:
        IntersectionResult with the deduplicated vertex set and, in row
        order, one marker per feasible intersection of the synthetic row.
    """
    coefficients, bounds = constraint_arrays(system, precision)
    synthetic = system.synthetic_index
    n = len(system.rows)

    vertices: set[Point] = set()
    markers: list[Point] = []
    singular = 0

    for i in range(n):
        for j in range(n):
            if i == j:
                continue

            solution = solve_2x2(system.rows[i], system.rows[j])
            if solution is None:
                singular += 1
                continue

            try:
                point = Point.from_exact(*solution)
            except OverflowError:
                logger.debug("Intersection of rows %d/%d exceeds float range", i, j)
                continue

            if not is_feasible(point, coefficients, bounds):
                continue

            if i == synthetic:
                markers.append(point)
            vertices.add(point)

    logger.debug(
        "Intersections: rows=%d vertices=%d markers=%d singular_pairs=%d",
        n, len(vertices), len(markers), singular,
    )
    return IntersectionResult(
        vertices=frozenset(vertices),
        unbounded_markers=tuple(markers),
    )


def classify_unbounded(
    markers: tuple[Point, ...],
) -> tuple[FillStrategy, Point | None]:
    """Pick the fill strategy and fade target for a marker collection.

    0 markers: SOLID, no target.
    1 marker:  FADE_ONE toward the marker.
    2 markers: FADE_TWO toward their midpoint.

    More than two markers cannot come out of a 2-variable system with a
    single synthetic bound unless several lines meet it at one point; the
    first two are used.
    """
    if not markers:
        return FillStrategy.SOLID, None
    if len(markers) == 1:
        return FillStrategy.FADE_ONE, markers[0]

    if len(markers) > 2:
        logger.warning(
            "Expected at most 2 unbounded markers, got %d; using the first two",
            len(markers),
        )

    p1, p2 = markers[0], markers[1]
    if p1.exact is not None and p2.exact is not None:
        midpoint = Point.from_exact(
            (p1.exact[0] + p2.exact[0]) / 2,
            (p1.exact[1] + p2.exact[1]) / 2,
        )
    else:
        midpoint = Point((p1.x + p2.x) / 2.0, (p1.y + p2.y) / 2.0)
    return FillStrategy.FADE_TWO, midpoint

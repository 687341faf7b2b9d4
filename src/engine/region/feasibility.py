"""Float feasibility test for candidate vertices.

Intersections are solved exactly, but the test against every constraint runs
in floating point. With SINGLE precision the coefficients, the left-hand side
and the bound are all rounded to float32, which acts as a tolerance window:
a vertex lying exactly on a constraint line is not rejected because its
coordinates were rounded when leaving the rational domain.

The window is not a rigorous certificate. For nearly-degenerate systems a
point just outside a constraint can pass, or a true vertex can fail. This is
the single place that decides it; tightening the test means changing
``FloatPrecision`` here only.
"""

import numpy as np

from src.config.settings import FloatPrecision
from src.engine.region.primitives import ConstraintSystem, Point
from src.models.common import to_float

_DTYPES: dict[FloatPrecision, type[np.floating]] = {
    FloatPrecision.SINGLE: np.float32,
    FloatPrecision.DOUBLE: np.float64,
}


def constraint_arrays(
    system: ConstraintSystem,
    precision: FloatPrecision = FloatPrecision.SINGLE,
) -> tuple[np.ndarray, np.ndarray]:
    """Split a system into an (n, 2) coefficient matrix and an n-vector of bounds.

    Both are rounded to the test precision once so the pair loop can reuse
    them for every candidate point.
    """
    dtype = _DTYPES[FloatPrecision(precision)]
    if not system.rows:
        return np.zeros((0, 2), dtype=dtype), np.zeros(0, dtype=dtype)
    # Out-of-range values (the synthetic bound for huge inputs) become +/-inf
    coefficients = np.array(
        [[to_float(v) for v in row.coefficients] for row in system.rows],
        dtype=dtype,
    )
    bounds = np.array([to_float(row.c) for row in system.rows], dtype=dtype)
    return coefficients, bounds


def is_feasible(
    point: Point,
    coefficients: np.ndarray,
    bounds: np.ndarray,
) -> bool:
    """True iff ``point`` satisfies every row ``a*x + b*y <= c``.

    Products are accumulated in double precision and the sum is rounded back
    to the dtype of ``bounds`` before comparing.
    """
    if coefficients.shape[0] == 0:
        return True
    xy = np.array([point.x, point.y], dtype=np.float64)
    lhs = (coefficients.astype(np.float64) @ xy).astype(bounds.dtype)
    return bool(np.all(lhs <= bounds))

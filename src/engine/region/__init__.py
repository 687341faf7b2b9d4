"""Feasible-Region Geometry Engine.

Computes the drawable feasible region of a two-variable linear program
given as rows ``a*x + b*y <= c``: explicit lower bounds plus a synthetic
bound, exact pairwise intersections, a float feasibility filter, unbounded
direction markers and a convex boundary ordering.

This module is DETERMINISTIC and holds no state between calls.
"""

from src.engine.region.builder import compute_region
from src.engine.region.primitives import (
    ConstraintRow,
    ConstraintSystem,
    FillStrategy,
    IntersectionResult,
    Point,
    RegionGeometry,
)

__all__ = [
    "ConstraintRow",
    "ConstraintSystem",
    "FillStrategy",
    "IntersectionResult",
    "Point",
    "RegionGeometry",
    "compute_region",
]

"""Tests for compute_region: end-to-end feasible-region geometry.

Covers the documented behaviours: triangle/square/quadrant regions,
unbounded fill strategies, empty regions, input coercion, determinism.
"""

from fractions import Fraction

import pytest

from src.config.settings import FloatPrecision
from src.engine.region import FillStrategy, compute_region
from src.engine.region.primitives import ConstraintRow


def _coords(points) -> list[tuple[float, float]]:
    return [p.as_tuple() for p in points]


class TestBoundedRegions:
    def test_triangle(self, triangle_rows) -> None:
        region = compute_region(triangle_rows)
        assert set(_coords(region.vertices)) == {(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)}
        assert region.unbounded_markers == ()
        assert region.fill_strategy == FillStrategy.SOLID
        assert region.fade_target is None
        assert region.is_bounded

    def test_square_boundary_is_a_rotation_of_the_square(self, square_rows) -> None:
        region = compute_region(square_rows)
        walk = _coords(region.boundary)
        square = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
        rotations = [square[i:] + square[:i] for i in range(4)]
        reversed_sq = square[::-1]
        rotations += [reversed_sq[i:] + reversed_sq[:i] for i in range(4)]
        assert walk in rotations

    def test_constraint_rows_exclude_synthetic(self, triangle_rows) -> None:
        region = compute_region(triangle_rows)
        assert region.constraint_rows == (
            ConstraintRow(1, 1, 1),
            ConstraintRow(-1, 0, 0),
            ConstraintRow(0, -1, 0),
        )

    def test_boundary_is_permutation_of_vertices(self) -> None:
        rows = [
            ConstraintRow(1, 2, 8),
            ConstraintRow(3, 1, 9),
            ConstraintRow(-1, 1, 2),
        ]
        region = compute_region(rows)
        assert set(region.boundary) == region.vertices
        assert len(region.boundary) == len(region.vertices)


class TestUnboundedRegions:
    def test_quadrant_has_two_markers(self, quadrant_rows) -> None:
        region = compute_region(quadrant_rows)
        assert len(region.unbounded_markers) == 2
        assert set(_coords(region.vertices)) == {(0.0, 0.0)}
        assert region.fill_strategy == FillStrategy.FADE_TWO

    def test_strip_fades_toward_marker_midpoint(self, strip_rows) -> None:
        region = compute_region(strip_rows)
        assert region.fill_strategy == FillStrategy.FADE_TWO
        assert region.fade_target.as_tuple() == (2.5, 0.5)
        assert not region.is_bounded

    def test_finite_vertices_drop_markers(self, strip_rows) -> None:
        region = compute_region(strip_rows)
        assert set(_coords(region.finite_vertices())) == {(0.0, 0.0), (0.0, 1.0)}

    def test_open_wedge(self) -> None:
        # x + y >= 2 in the first quadrant
        region = compute_region([ConstraintRow(-1, -1, -2)])
        # S = 2, U = 8
        assert set(_coords(region.unbounded_markers)) == {(0.0, 8.0), (8.0, 0.0)}
        assert set(_coords(region.vertices)) == {(0.0, 2.0), (2.0, 0.0), (0.0, 8.0), (8.0, 0.0)}


class TestDegenerateInput:
    def test_empty_region_is_not_an_error(self) -> None:
        region = compute_region([ConstraintRow(1, 1, 1), ConstraintRow(-1, -1, -3)])
        assert region.is_empty
        assert region.boundary == ()
        assert region.unbounded_markers == ()
        assert region.fill_strategy == FillStrategy.SOLID

    def test_region_outside_first_quadrant_is_empty(self) -> None:
        region = compute_region([ConstraintRow(1, 0, -1)])
        assert region.is_empty

    def test_parallel_constraints(self) -> None:
        region = compute_region([ConstraintRow(1, 0, 1), ConstraintRow(1, 0, 2), ConstraintRow(0, 1, 1)])
        assert set(_coords(region.vertices)) == {(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)}

    def test_sequence_rows_coerced(self) -> None:
        region = compute_region([(1, 1, "1")])
        assert len(region.vertices) == 3

    def test_bad_row_length_raises(self) -> None:
        with pytest.raises(ValueError, match="3 entries"):
            compute_region([(1, 1)])

    def test_deterministic(self, strip_rows) -> None:
        assert compute_region(strip_rows) == compute_region(strip_rows)

    def test_double_precision(self, triangle_rows) -> None:
        region = compute_region(triangle_rows, precision=FloatPrecision.DOUBLE)
        assert len(region.vertices) == 3

    def test_rational_vertex_exact(self) -> None:
        region = compute_region([ConstraintRow(3, 1, 1), ConstraintRow(1, 3, 1)])
        exact = {p.exact for p in region.vertices}
        assert (Fraction(1, 4), Fraction(1, 4)) in exact

    def test_huge_rhs_does_not_raise(self) -> None:
        region = compute_region([ConstraintRow(1, 0, 10**200), ConstraintRow(0, 1, 1)])
        assert {(0.0, 0.0), (0.0, 1.0), (1e200, 1.0)} <= set(_coords(region.vertices))

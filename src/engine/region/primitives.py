"""Engine-level value types for feasible-region geometry.

Frozen dataclasses (not Pydantic), same pattern as the other engine result
types: cheap to build inside the O(n^2) intersection loop and hashable.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from fractions import Fraction

from src.models.common import to_float, to_fraction


@dataclass(frozen=True)
class ConstraintRow:
    """One inequality ``a*x + b*y <= c`` with exact rational coefficients."""

    a: Fraction
    b: Fraction
    c: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", to_fraction(self.a))
        object.__setattr__(self, "b", to_fraction(self.b))
        object.__setattr__(self, "c", to_fraction(self.c))

    @classmethod
    def from_sequence(cls, values) -> "ConstraintRow":
        """Build a row from an ``(a, b, c)`` sequence.

        Raises:
            ValueError: If the sequence does not hold exactly three entries.
        """
        values = list(values)
        if len(values) != 3:
            msg = f"constraint row must have 3 entries (a, b, c), got {len(values)}."
            raise ValueError(msg)
        return cls(values[0], values[1], values[2])

    @property
    def coefficients(self) -> tuple[Fraction, Fraction]:
        return (self.a, self.b)

    def as_floats(self) -> tuple[float, float, float]:
        return (to_float(self.a), to_float(self.b), to_float(self.c))


@dataclass(frozen=True)
class ConstraintSystem:
    """Ordered constraint rows over the two variables (x, y).

    When ``has_synthetic_bound`` is set, the last row is the artificial
    ``x + y <= U`` bound appended by the normalizer.
    """

    rows: tuple[ConstraintRow, ...]
    has_synthetic_bound: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))
        if self.has_synthetic_bound and not self.rows:
            raise ValueError("a system with a synthetic bound cannot be empty.")

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def synthetic_index(self) -> int | None:
        """Positional index of the synthetic bound, or None."""
        if not self.has_synthetic_bound:
            return None
        return len(self.rows) - 1

    @property
    def visible_rows(self) -> tuple[ConstraintRow, ...]:
        """All rows except the synthetic bound."""
        if self.has_synthetic_bound:
            return self.rows[:-1]
        return self.rows


@dataclass(frozen=True, eq=False)
class Point:
    """A point in the plane.

    ``x``/``y`` are the float coordinates used by all downstream geometry.
    ``exact`` keeps the rational coordinates the point was solved from;
    equality and hashing use them when present, so the same vertex reached
    through different constraint pairs collapses to one set entry.
    """

    x: float
    y: float
    exact: tuple[Fraction, Fraction] | None = field(default=None, repr=False)

    @classmethod
    def from_exact(cls, x: Fraction, y: Fraction) -> "Point":
        return cls(float(x), float(y), (x, y))

    def _key(self) -> tuple:
        # Fraction and float hash consistently for equal values
        if self.exact is not None:
            return self.exact
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class IntersectionResult:
    """Feasible intersections plus the markers on the synthetic bound."""

    vertices: frozenset[Point]
    unbounded_markers: tuple[Point, ...]


class FillStrategy(StrEnum):
    """How the region polygon is filled, keyed on the unbounded marker count."""

    SOLID = "SOLID"          # bounded region
    FADE_ONE = "FADE_ONE"    # unbounded in one direction
    FADE_TWO = "FADE_TWO"    # unbounded in two directions


@dataclass(frozen=True)
class RegionGeometry:
    """Everything needed to render the feasible region of a 2-variable LP."""

    constraint_rows: tuple[ConstraintRow, ...]  # synthetic bound excluded
    vertices: frozenset[Point]
    boundary: tuple[Point, ...]  # permutation of vertices
    unbounded_markers: tuple[Point, ...]
    fill_strategy: FillStrategy
    fade_target: Point | None  # None for SOLID

    @property
    def is_empty(self) -> bool:
        return not self.vertices

    @property
    def is_bounded(self) -> bool:
        return not self.unbounded_markers

    def finite_vertices(self) -> tuple[Point, ...]:
        """Boundary points that are true vertices, not unbounded markers."""
        markers = set(self.unbounded_markers)
        return tuple(p for p in self.boundary if p not in markers)

"""Pydantic schema for the LP state handed over by the external solver.

The solver owns the dictionary; the region layer only needs a read-only
snapshot of it: the constraint rows over the two displayed variables, the
objective, its current value and the current basic solution.
"""

from pydantic import Field, field_validator

from src.engine.region.primitives import ConstraintRow
from src.models.common import Rational, RegionBase


class LPSnapshot(RegionBase):
    """Read-only view of an LP at one simplex step."""

    constraints: list[list[Rational]] = Field(
        default_factory=list,
        description="Rows [a, b, c] meaning a*x + b*y <= c.",
    )
    objective: list[Rational] = Field(
        ..., min_length=2, description="Objective coefficients; first two are drawn.",
    )
    objective_value: Rational = Field(..., description="Current objective value.")
    point: list[Rational] = Field(
        ..., min_length=2, description="Current basic solution; first two are drawn.",
    )
    basic_count: int = Field(
        ..., ge=0, description="Number of free/basic variables in the dictionary.",
    )

    @field_validator("constraints")
    @classmethod
    def _rows_have_three_entries(cls, rows: list[list]) -> list[list]:
        for index, row in enumerate(rows):
            if len(row) != 3:
                msg = f"constraint row {index} must have 3 entries (a, b, c), got {len(row)}."
                raise ValueError(msg)
        return rows

    @property
    def is_two_dimensional(self) -> bool:
        return self.basic_count == 2

    def constraint_rows(self) -> list[ConstraintRow]:
        """Constraint rows as engine value objects."""
        return [ConstraintRow.from_sequence(row) for row in self.constraints]

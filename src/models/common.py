"""Shared types and base models used across the region domain models."""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Annotated

from pydantic import BaseModel, BeforeValidator


def to_fraction(value: object) -> Fraction:
    """Convert a number to an exact Fraction.

    - Fraction / int -> exact
    - Decimal / str  -> exact decimal or ``"p/q"`` value
    - float          -> the value of its shortest repr (0.1 -> 1/10)

    Raises:
        TypeError: For booleans and non-numeric types.
        ValueError: For NaN, infinities and unparsable strings.
    """
    if isinstance(value, bool):
        raise TypeError("booleans are not valid rational coefficients")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            msg = f"coefficient must be finite, got {value!r}"
            raise ValueError(msg)
        return Fraction(repr(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            msg = f"coefficient must be finite, got {value!r}"
            raise ValueError(msg)
        return Fraction(value)
    if isinstance(value, str):
        return Fraction(value.strip())
    msg = f"cannot convert {type(value).__name__} to a rational number"
    raise TypeError(msg)


def to_float(value: Fraction) -> float:
    """Convert a Fraction to float, saturating to +/-inf outside float range."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _coerce_rational(value: object) -> Fraction:
    # pydantic only wraps ValueError into ValidationError
    try:
        return to_fraction(value)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


# --- Reusable annotated types ---

# Exact rational number given as int, "p/q" string, Decimal, Fraction or float
Rational = Annotated[Fraction, BeforeValidator(_coerce_rational)]


# --- Base model ---


class RegionBase(BaseModel):
    """Base model with common configuration for all region Pydantic models."""

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "protected_namespaces": (),
    }

"""Drawing surface contract for the region orchestrator.

The orchestrator never picks colours or pixels. It emits draw commands tagged
with a role; the surface maps roles to its own paint policy.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol


class LineRole(StrEnum):
    """What a drawn line stands for."""

    CONSTRAINT = "CONSTRAINT"
    OBJECTIVE = "OBJECTIVE"


class PointRole(StrEnum):
    """What a drawn point stands for."""

    VERTEX = "VERTEX"
    SOLUTION = "SOLUTION"


@dataclass(frozen=True)
class Line:
    """The full line ``a*x + b*y = c``."""

    a: float
    b: float
    c: float
    role: LineRole


@dataclass(frozen=True)
class MarkerPoint:
    x: float
    y: float
    role: PointRole
    highlighted: bool = False


@dataclass(frozen=True)
class SolidFill:
    """Uniform fill of a bounded region."""


@dataclass(frozen=True)
class GradientFill:
    """Fill fading from ``start`` toward the background at ``end``."""

    start: tuple[float, float]
    end: tuple[float, float]


@dataclass(frozen=True)
class Polygon:
    vertices: tuple[tuple[float, float], ...]
    fill: SolidFill | GradientFill


class DrawingSurface(Protocol):
    """Anything the orchestrator can draw onto."""

    def clear(self) -> None: ...

    def set_axes_visible(self, visible: bool) -> None: ...

    def add_line(self, line: Line) -> None: ...

    def add_point(self, point: MarkerPoint) -> None: ...

    def add_polygon(self, polygon: Polygon) -> None: ...


@dataclass
class RecordingSurface:
    """In-memory surface keeping a display list. GUI surfaces replace it."""

    axes_visible: bool = False
    lines: list[Line] = field(default_factory=list)
    points: list[MarkerPoint] = field(default_factory=list)
    polygons: list[Polygon] = field(default_factory=list)

    def clear(self) -> None:
        self.lines.clear()
        self.points.clear()
        self.polygons.clear()

    def set_axes_visible(self, visible: bool) -> None:
        self.axes_visible = visible

    def add_line(self, line: Line) -> None:
        self.lines.append(line)

    def add_point(self, point: MarkerPoint) -> None:
        self.points.append(point)

    def add_polygon(self, polygon: Polygon) -> None:
        self.polygons.append(polygon)

    def lines_with_role(self, role: LineRole) -> list[Line]:
        return [line for line in self.lines if line.role == role]

    def points_with_role(self, role: PointRole) -> list[MarkerPoint]:
        return [point for point in self.points if point.role == role]

    @property
    def is_empty(self) -> bool:
        return not (self.lines or self.points or self.polygons)

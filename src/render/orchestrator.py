"""Region render orchestrator.

Draws an LP snapshot onto a DrawingSurface: constraint lines, the feasible
region (solid or fading into unbounded directions), its vertices, the current
objective line and the current basic solution.
"""

import structlog

from src.config.settings import Settings, get_settings
from src.engine.region import FillStrategy, RegionGeometry, compute_region
from src.models.lp import LPSnapshot
from src.render.surface import (
    DrawingSurface,
    GradientFill,
    Line,
    LineRole,
    MarkerPoint,
    PointRole,
    Polygon,
    SolidFill,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def region_fill(region: RegionGeometry) -> SolidFill | GradientFill:
    """Choose the polygon fill from the region's unbounded markers."""
    if region.fill_strategy == FillStrategy.SOLID or region.fade_target is None:
        return SolidFill()
    return GradientFill(
        start=region.boundary[0].as_tuple(),
        end=region.fade_target.as_tuple(),
    )


def draw_lp(
    surface: DrawingSurface,
    lp: LPSnapshot | None,
    settings: Settings | None = None,
) -> RegionGeometry | None:
    """Draw an LP's constraints and colour its feasible region.

    Only LPs with exactly two basic variables have a planar picture; for
    anything else the surface is cleared and its axes hidden.

    Returns:
        The computed region, or None when nothing was drawn.
    """
    if settings is None:
        settings = get_settings()

    surface.clear()

    if lp is None or not lp.is_two_dimensional:
        surface.set_axes_visible(False)
        logger.debug(
            "lp_not_drawable",
            basic_count=None if lp is None else lp.basic_count,
        )
        return None
    surface.set_axes_visible(True)

    region = compute_region(
        lp.constraint_rows(),
        precision=settings.FEASIBILITY_PRECISION,
    )

    for row in region.constraint_rows:
        a, b, c = row.as_floats()
        surface.add_line(Line(a, b, c, LineRole.CONSTRAINT))

    if region.is_empty:
        logger.info("feasible_region_empty", rows=len(region.constraint_rows))
        return region

    for vertex in region.finite_vertices():
        surface.add_point(MarkerPoint(vertex.x, vertex.y, PointRole.VERTEX))

    surface.add_polygon(
        Polygon(
            vertices=tuple(p.as_tuple() for p in region.boundary),
            fill=region_fill(region),
        )
    )

    # Current objective: c1*x + c2*y = z
    surface.add_line(
        Line(
            float(lp.objective[0]),
            float(lp.objective[1]),
            float(lp.objective_value),
            LineRole.OBJECTIVE,
        )
    )

    surface.add_point(
        MarkerPoint(
            float(lp.point[0]),
            float(lp.point[1]),
            PointRole.SOLUTION,
            highlighted=True,
        )
    )

    logger.debug(
        "lp_drawn",
        vertices=len(region.vertices),
        markers=len(region.unbounded_markers),
        fill=region.fill_strategy.value,
    )
    return region

"""Convex boundary ordering.

Input: unordered points that all lie on the boundary of a convex polygon.
Output: the same points ordered so that drawing edges between consecutive
points (cyclically) never self-intersects.

1. Sort ascending by x, ties ascending by y. The first point is ``xmin``
   (lowest y among the leftmost), the last is ``xmax`` (highest y among the
   rightmost).
2. Split the remaining points by the line L through xmin and xmax: points
   above L go to the upper chain, points below to the lower chain. Points
   exactly on L go to the upper chain, unless every off-line point is above
   L (L is then the bottom edge and they are walked back along it).
3. The upper chain starts at xmin and runs in ascending sort order.
4. The lower chain ends at xmax and is reversed (descending x, then y).
5. Upper chain followed by lower chain.
"""

from collections.abc import Iterable

from src.engine.region.primitives import Point


def _sort_key(point: Point) -> tuple[float, float]:
    return (point.x, point.y)


def side_of_line(start: Point, end: Point, point: Point) -> float:
    """Cross product of (end - start) and (point - start).

    Positive when ``point`` is above the line through start and end (for
    ``end.x > start.x``), zero on it, negative below. Same sign as comparing
    ``point.y`` to the line evaluated at ``point.x``, without dividing by
    the x-range.
    """
    return (end.x - start.x) * (point.y - start.y) - (end.y - start.y) * (point.x - start.x)


def order_convex_boundary(points: Iterable[Point]) -> tuple[Point, ...]:
    """Order convex-polygon boundary points into a non-self-intersecting cycle.

    Returns a permutation of the input. Fewer than three points, or points
    that all share one x coordinate, come back in plain sort order.
    """
    ordered = sorted(points, key=_sort_key)
    if len(ordered) < 3:
        return tuple(ordered)

    x_min = ordered[0]
    x_max = ordered[-1]
    if x_max.x == x_min.x:
        # Vertical L: everything is on one line, sort order is the walk
        return tuple(ordered)

    above: list[Point] = []
    below: list[Point] = []
    on_line: list[Point] = []
    for point in ordered[1:-1]:
        side = side_of_line(x_min, x_max, point)
        if side > 0:
            above.append(point)
        elif side < 0:
            below.append(point)
        else:
            on_line.append(point)

    # Points on L sit on a polygon edge only when L itself is an edge; they
    # belong to the chain that walks along it.
    if above and not below:
        upper = [x_min] + above
        lower = sorted(below + on_line, key=_sort_key)
    else:
        upper = [x_min] + sorted(above + on_line, key=_sort_key)
        lower = below

    lower.append(x_max)
    lower.reverse()

    return tuple(upper + lower)

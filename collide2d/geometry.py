"""Leaf predicates: segment crossing and point-in-triangle containment."""

from enum import Enum, auto

import numpy as np
from loguru import logger
from shewchuk import orientation

from collide2d.utils import EPS, Segment, Triangle, Vec2d, as_segment, as_triangle, as_vec2, cross


class PointInTriangle(Enum):
    vertex = auto()
    edge = auto()
    inside = auto()
    outside = auto()


def is_point_in_box(
    a: Vec2d,
    b: Vec2d,
    p: Vec2d,
    eps: float = 0.0,
) -> bool:
    # check if p is within the bounding box of [a, b]
    return (
        min(a[0], b[0]) - eps <= p[0] <= max(a[0], b[0]) + eps
        and min(a[1], b[1]) - eps <= p[1] <= max(a[1], b[1]) + eps
    )


def segments_intersect(a: Segment, b: Segment) -> bool:
    """
    Check if two open line segments cross.

    Solves ``a0 + u * (a1 - a0) = b0 + v * (b1 - b0)`` for (u, v) with
    Cramer's rule. The segments cross iff both parameters lie strictly
    inside (0, 1).

    Parameters
    ----------
    a, b : Segment
        Segments given as two endpoints each.

    Returns
    -------
    bool
        True if the segments cross. Parallel and collinear segments never
        cross, and neither do segments that only touch at an endpoint.
    """
    a0, a1 = as_segment(a)
    b0, b1 = as_segment(b)

    # u * a01 + v * b10 = ab
    a01 = a1 - a0
    b10 = b0 - b1
    ab = b0 - a0
    d = cross(a01, b10)
    if d == 0:
        logger.debug("Segments are parallel, no crossing")
        return False

    u = cross(ab, b10) / d
    if u <= 0 or u >= 1:
        return False
    v = cross(a01, ab) / d
    return bool(0 < v < 1)


def point_in_triangle(p: Vec2d, t: Triangle) -> bool:
    """
    Check if a point lies strictly inside a triangle.

    ``p - t0`` is written as ``u * (t1 - t0) + v * (t2 - t0)``; the point is
    inside iff ``u > 0``, ``v > 0`` and ``u + v < 1``. Points on an edge or
    a vertex are outside, and so is every point of a zero-area triangle.
    """
    x = as_vec2(p)
    t0, t1, t2 = as_triangle(t)

    x = x - t0
    y1 = t1 - t0
    y2 = t2 - t0
    # u * y1 + v * y2 = x
    d = cross(y1, y2)
    if d == 0:
        return False

    u = cross(x, y2) / d
    if u <= 0:
        return False
    v = cross(y1, x) / d
    return bool(v > 0 and u + v < 1)


def classify_point(
    triangle: Triangle,
    point: Vec2d,
    eps: float = EPS,
) -> tuple[PointInTriangle, int | None]:
    """
    Classify a point relative to a triangle using Shewchuk's exact orientation predicate.

    Unlike :func:`point_in_triangle`, boundary cases are reported rather than
    folded into "outside".

    Parameters
    ----------
    triangle : Triangle
        Triangle vertices [A, B, C].
    point : Vec2d
        The query point.
    eps : float, optional
        Tolerance for vertex coordinate equality (not used in orientation).

    Returns
    -------
    (PointInTriangle, Optional[int])
        - Classification (inside, edge, vertex, outside)
        - For ``vertex``, the index of the matched vertex; for ``edge``, the
          index of the vertex opposite to the edge; otherwise None.
    """
    tri = as_triangle(triangle)
    p = as_vec2(point)

    for i, v in enumerate(tri):
        if np.allclose(p, v, rtol=0.0, atol=eps):
            return PointInTriangle.vertex, i

    a, b, c = (tuple(map(float, v)) for v in tri)
    q = tuple(map(float, p))

    # -1 (CW), 0 (collinear), +1 (CCW)
    o1 = orientation(*a, *b, *q)
    o2 = orientation(*b, *c, *q)
    o3 = orientation(*c, *a, *q)

    # collinear with an edge and inside its box means on the edge
    if o1 == 0 and is_point_in_box(a, b, q):
        return PointInTriangle.edge, 2
    if o2 == 0 and is_point_in_box(b, c, q):
        return PointInTriangle.edge, 0
    if o3 == 0 and is_point_in_box(c, a, q):
        return PointInTriangle.edge, 1

    if (o1 > 0 and o2 > 0 and o3 > 0) or (o1 < 0 and o2 < 0 and o3 < 0):
        return PointInTriangle.inside, None

    return PointInTriangle.outside, None

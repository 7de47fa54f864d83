"""Derived metrics and composite collision tests built on the leaf predicates."""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray
from loguru import logger

from collide2d.geometry import point_in_triangle, segments_intersect
from collide2d.utils import Segment, Triangle, Vec2d, as_segment, as_triangle, as_vec2, cross

PI = np.float32(np.pi)
TAU = np.float32(2 * np.pi)

# (start, end) vertex indices of each triangle edge
EDGES = ((0, 1), (0, 2), (1, 2))


def closest_point(p: Vec2d, l: Segment) -> NDArray[np.float32]:
    """
    Find the point of segment ``l`` nearest to ``p``.

    The segment must have positive length; for a zero-length segment the
    projection divides by zero and the result is NaN.
    """
    x = as_vec2(p)
    l0, l1 = as_segment(l)

    direction = l1 - l0
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.dot(x - l0, direction) / np.dot(direction, direction)
    if t <= 0:
        return l0
    if t >= 1:
        return l1
    return l0 * (1 - t) + l1 * t


def ray_hit(origin: Vec2d, direction: Vec2d, l: Segment) -> float | None:
    """
    Intersect a ray with a segment.

    Solves ``origin + k * direction = l0 + j * (l1 - l0)``. The ray hits iff
    it meets the segment strictly ahead of its origin (``k > 0``) and
    strictly between the endpoints (``0 < j < 1``).

    Parameters
    ----------
    origin : Vec2d
        Start of the ray.
    direction : Vec2d
        Direction of the ray; need not be unit length.
    l : Segment
        The target segment.

    Returns
    -------
    float | None
        The ray parameter ``k`` of the hit, or None. ``k`` is measured in
        multiples of ``direction``, so it is a distance only when
        ``direction`` is a unit vector. Values from calls sharing the same
        direction are directly comparable.
    """
    o = as_vec2(origin)
    r = as_vec2(direction)
    l0, l1 = as_segment(l)

    # k * r + j * l10 = ol
    l10 = l0 - l1
    ol = l0 - o
    d = cross(r, l10)
    if d == 0:
        logger.debug("Ray is parallel to segment, no hit")
        return None

    j = cross(r, ol) / d
    if j <= 0 or j >= 1:
        return None
    k = cross(ol, l10) / d
    if k <= 0:
        return None
    return float(k)


def nearest_ray_hit(
    origin: Vec2d,
    direction: Vec2d,
    segments: Sequence[Segment],
    debug: bool = False,
) -> tuple[int, float] | None:
    """
    Return ``(index, k)`` of the first segment hit by the ray, or None.

    Ties are resolved in favor of the lowest index. If ``debug`` is True the
    ray, the candidate segments and the hit are plotted.
    """
    r = as_vec2(direction)
    if not r.any():
        logger.debug(f"Ray from {origin} has zero direction, nothing can be hit")
        return None

    best: tuple[int, float] | None = None
    for i, segment in enumerate(segments):
        k = ray_hit(origin, r, segment)
        if k is not None and (best is None or k < best[1]):
            best = (i, k)

    if debug:
        from collide2d.debug_utils import _plot_ray

        _plot_ray(origin, r, segments, best)

    return best


def triangles_intersect(
    t1: Triangle,
    t2: Triangle,
    exhaustive: bool = True,
    debug: bool = False,
) -> bool:
    """
    Check if the interiors of two triangles overlap.

    The triangles intersect if an edge of one crosses an edge of the other,
    or a vertex of one lies strictly inside the other. Triangles that only
    share an edge or a vertex do not intersect.

    Parameters
    ----------
    t1, t2 : Triangle
        The two triangles.
    exhaustive : bool, optional
        If True, test all 9 edge pairs and all 6 vertices. If False, test
        only edges (v0, v1) and (v0, v2) of ``t1`` against the edges of
        ``t2``, the vertices of ``t2`` against ``t1`` and ``t1[0]`` against
        ``t2``. The reduced test can miss overlaps where a vertex of one
        triangle lies exactly on an edge of the other, and its result may
        then depend on vertex order.
    debug : bool, optional
        If True, plot both triangles.

    Returns
    -------
    bool
        True if the triangles intersect, False otherwise.
    """
    a = as_triangle(t1)
    b = as_triangle(t2)

    if debug:
        from collide2d.debug_utils import _plot_triangles

        _plot_triangles(a, b)

    edges_a = EDGES if exhaustive else EDGES[:2]
    for i, j in edges_a:
        for k, m in EDGES:
            if segments_intersect((a[i], a[j]), (b[k], b[m])):
                logger.trace(f"Edge {i}-{j} of t1 crosses edge {k}-{m} of t2")
                return True

    for i, v in enumerate(b):
        if point_in_triangle(v, a):
            logger.trace(f"Vertex {i} of t2 is inside t1")
            return True

    vertices_a = a if exhaustive else a[:1]
    for i, v in enumerate(vertices_a):
        if point_in_triangle(v, b):
            logger.trace(f"Vertex {i} of t1 is inside t2")
            return True

    return False


def incircle(t: Triangle) -> tuple[NDArray[np.float32], float]:
    """
    Compute the center and radius of the circle inscribed in a triangle.

    For a triangle with zero perimeter a warning is logged and
    ``(t[0], 0.0)`` is returned.
    """
    t0, t1, t2 = as_triangle(t)

    # side lengths, each indexed by its opposite vertex
    l0 = np.linalg.norm(t2 - t1)
    l1 = np.linalg.norm(t2 - t0)
    l2 = np.linalg.norm(t1 - t0)
    peri = l0 + l1 + l2
    if peri == 0:
        logger.warning(f"Degenerate triangle {t0.tolist()} has zero perimeter, no incircle")
        return t0.copy(), 0.0

    # twice the area over the perimeter equals area over the semi-perimeter
    area2 = abs(cross(t1 - t0, t2 - t0))
    radius = area2 / peri
    center = (t0 * l0 + t1 * l1 + t2 * l2) / peri
    return center.astype(np.float32), float(radius)


def angle_delta(a1: float, a2: float) -> float:
    """
    Signed shortest rotation from ``a1`` to ``a2``, counterclockwise positive.

    Both angles must lie in [-pi, pi); the result does too.
    """
    d = np.float32(a2) - np.float32(a1)
    if d >= PI:
        d -= TAU
    elif d < -PI:
        d += TAU
    return float(d)

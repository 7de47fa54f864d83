from collide2d.geometry import (
    PointInTriangle,
    classify_point,
    point_in_triangle,
    segments_intersect,
)
from collide2d.query import (
    angle_delta,
    closest_point,
    incircle,
    nearest_ray_hit,
    ray_hit,
    triangles_intersect,
)

__all__ = [
    "PointInTriangle",
    "angle_delta",
    "classify_point",
    "closest_point",
    "incircle",
    "nearest_ray_hit",
    "point_in_triangle",
    "ray_hit",
    "segments_intersect",
    "triangles_intersect",
]

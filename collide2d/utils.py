from collections.abc import Iterator
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

EPS = 1e-9
Vec2d: TypeAlias = tuple[float, float] | NDArray[np.floating]
Segment: TypeAlias = tuple[Vec2d, Vec2d] | NDArray[np.floating]
Triangle: TypeAlias = tuple[Vec2d, Vec2d, Vec2d] | NDArray[np.floating]


def _as_points(obj, n: int, name: str) -> NDArray[np.float32]:
    arr = np.array(obj, dtype=np.float32)
    if arr.shape != (n, 2):
        raise ValueError(f"Expected {name} of shape ({n}, 2), got {arr.shape}")
    arr.flags.writeable = False
    return arr


def as_vec2(p: Vec2d) -> NDArray[np.float32]:
    """Convert a point to a read-only float32 array of shape (2,)."""
    arr = np.array(p, dtype=np.float32)
    if arr.shape != (2,):
        raise ValueError(f"Expected a 2D point of shape (2,), got {arr.shape}")
    arr.flags.writeable = False
    return arr


def as_segment(segment: Segment) -> NDArray[np.float32]:
    return _as_points(segment, 2, "segment")


def as_triangle(triangle: Triangle) -> NDArray[np.float32]:
    return _as_points(triangle, 3, "triangle")


def cross(a: NDArray[np.floating], b: NDArray[np.floating]) -> np.floating:
    """
    2D cross product ``a.x * b.y - a.y * b.x``.

    Zero iff ``a`` and ``b`` are parallel (or one of them is zero).
    """
    return a[0] * b[1] - a[1] * b[0]


def rotations(triangle: Triangle) -> Iterator[NDArray[np.float32]]:
    """Yield the three cyclic relabelings of a triangle, starting with itself."""
    tri = as_triangle(triangle)
    for i in range(3):
        yield np.roll(tri, -i, axis=0)

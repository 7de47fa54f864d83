"""Example script demonstrating the debug visualization for triangles_intersect.

The visualization shows both triangles filled, with vertex indices next to
each vertex. The second pair only overlaps through a vertex lying on the
other triangle's edge, which the reduced (6 edge pair) check misses.
"""

from collide2d.query import nearest_ray_hit, triangles_intersect


def main():
    t1 = ((0.0, 0.0), (0.0, 2.0), (2.0, 0.0))
    t2 = ((0.5, 0.5), (0.5, 1.5), (1.5, 0.5))
    print(f"Nested triangles intersect: {triangles_intersect(t1, t2, debug=True)}")

    t1 = ((0.0, 0.0), (2.0, 1.0), (2.0, -1.0))
    t2 = ((-1.0, 0.0), (3.0, 0.0), (1.0, -5.0))
    print(f"Exhaustive check: {triangles_intersect(t1, t2, debug=True)}")
    print(f"Reduced check: {triangles_intersect(t1, t2, exhaustive=False)}")

    walls = [
        ((5.0, -1.0), (5.0, 1.0)),
        ((2.0, -1.0), (2.0, 1.0)),
        ((3.0, -2.0), (3.0, 2.0)),
    ]
    hit = nearest_ray_hit((0.0, 0.0), (1.0, 0.2), walls, debug=True)
    if hit is None:
        print("Ray hits nothing")
    else:
        index, k = hit
        print(f"Ray hits wall {index} at k={k:.3f}")


if __name__ == "__main__":
    main()

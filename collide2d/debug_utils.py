from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from collide2d.utils import Segment, as_segment


def _plot_triangles(
    t1: NDArray[np.floating],
    t2: NDArray[np.floating],
    title: str = "Triangle pair",
) -> None:
    """
    Visualize two triangles with their vertex indices.

    Parameters
    ----------
    t1, t2 : NDArray[np.floating]
        Triangle vertices, shape (3, 2)
    title : str
        Title of the plot
    """
    import matplotlib.pyplot as plt
    from matplotlib.patches import Polygon

    fig, ax = plt.subplots()

    for tri, color, label in ((t1, "tab:blue", "t1"), (t2, "tab:orange", "t2")):
        ax.add_patch(
            Polygon(
                tri,
                alpha=0.4,
                facecolor=color,
                edgecolor="black",
                linewidth=1.5,
                label=label,
            )
        )
        for idx, (x, y) in enumerate(tri):
            ax.text(x, y, str(idx), fontsize=9, ha="left", va="bottom", color=color)

    ax.autoscale_view()
    ax.set_aspect("equal")
    ax.legend()
    ax.set_title(title)
    plt.show()


def _plot_ray(
    origin: NDArray[np.floating],
    direction: NDArray[np.floating],
    segments: Sequence[Segment],
    hit: tuple[int, float] | None,
) -> None:
    """Visualize a ray, the candidate segments and the nearest hit (if any)."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()

    for i, segment in enumerate(segments):
        (x0, y0), (x1, y1) = as_segment(segment)
        color = "red" if hit is not None and hit[0] == i else "gray"
        ax.plot([x0, x1], [y0, y1], "-", color=color, linewidth=2)
        ax.text((x0 + x1) / 2, (y0 + y1) / 2, str(i), fontsize=8, color=color)

    origin = np.asarray(origin, dtype=np.float32)
    if hit is not None:
        end = origin + direction * hit[1]
        ax.plot(*end, "rx", markersize=8, zorder=11)
    else:
        end = origin + direction
    ax.annotate("", xy=end, xytext=origin, arrowprops={"arrowstyle": "->"})
    ax.plot(*origin, "go", markersize=6, zorder=11)

    ax.set_aspect("equal")
    ax.set_title("Ray hit" if hit is not None else "Ray miss")
    plt.show()

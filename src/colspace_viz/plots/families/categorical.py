from __future__ import annotations

import pandas as pd

from colspace_viz.spaces import Space, require_columns

from ._axes import get_axes, point_kwargs, strip_axes

COLUMNS = ("x", "y")

# Troje (1993) categories by quadrant: (x sign, y sign) -> label
QUADRANTS = {
    (-1, 1): "p-y+",
    (1, 1): "y-y+",
    (-1, -1): "p-y-",
    (1, -1): "y-y-",
}


def catpoints(clrspdata: pd.DataFrame, ax, **kwargs):
    require_columns(clrspdata, COLUMNS, Space.CATEGORICAL)
    ax.scatter(clrspdata["x"].to_numpy(dtype=float), clrspdata["y"].to_numpy(dtype=float), **point_kwargs(kwargs))
    return ax


def catplot(
    clrspdata: pd.DataFrame,
    ax=None,
    *,
    labels: bool = True,
    out_lwd: float = 1.0,
    out_col: str = "black",
    **kwargs,
):
    """Plot the categorical fly colourspace as a labelled square."""
    require_columns(clrspdata, COLUMNS, Space.CATEGORICAL)
    ax = get_axes(ax, figsize=(5, 5))

    ax.plot([-1, 1, 1, -1, -1], [-1, -1, 1, 1, -1], color=out_col, linewidth=out_lwd, zorder=1)
    ax.plot([-1, 1], [0, 0], color=out_col, linewidth=out_lwd, zorder=1)
    ax.plot([0, 0], [-1, 1], color=out_col, linewidth=out_lwd, zorder=1)
    if labels:
        for (sx, sy), label in QUADRANTS.items():
            ax.text(0.8 * sx, 0.9 * sy, label, ha="center", va="center")

    catpoints(clrspdata, ax, **{"zorder": 3, **kwargs})
    ax.set_xlim(-1.1, 1.1)
    ax.set_ylim(-1.1, 1.1)
    strip_axes(ax)
    return ax

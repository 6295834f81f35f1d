from __future__ import annotations

import numpy as np
import pandas as pd

from colspace_viz.spaces import Space, require_columns

from ._axes import get_axes, point_kwargs, strip_axes

COLUMNS = ("x", "y")

# Maxwell triangle vertices (x, y) for the s, m, l receptors
VERTICES = {
    "S": (-1 / np.sqrt(2), -np.sqrt(2) / (2 * np.sqrt(3))),
    "M": (0.0, np.sqrt(2) / np.sqrt(3)),
    "L": (1 / np.sqrt(2), -np.sqrt(2) / (2 * np.sqrt(3))),
}


def tripoints(clrspdata: pd.DataFrame, ax, **kwargs):
    require_columns(clrspdata, COLUMNS, Space.TRISPACE)
    ax.scatter(clrspdata["x"].to_numpy(dtype=float), clrspdata["y"].to_numpy(dtype=float), **point_kwargs(kwargs))
    return ax


def triplot(
    clrspdata: pd.DataFrame,
    ax=None,
    *,
    achro: bool = True,
    labels: bool = True,
    achrocol: str = "grey",
    achrosize: float = 40,
    out_lwd: float = 1.0,
    out_col: str = "black",
    **kwargs,
):
    """Plot a trichromat colourspace as a Maxwell triangle.

    Parameters
    ----------
    clrspdata : pandas.DataFrame
        Result with ``x`` and ``y`` triangle coordinates.
    ax : matplotlib Axes, optional
        Axes to draw on; a new figure is created when omitted.
    achro : bool
        Mark the achromatic centre.
    labels : bool
        Label the receptor vertices.
    **kwargs
        Forwarded to ``Axes.scatter`` for the data points.
    """
    require_columns(clrspdata, COLUMNS, Space.TRISPACE)
    ax = get_axes(ax, figsize=(5, 5))

    names = list(VERTICES)
    xs = [VERTICES[n][0] for n in names] + [VERTICES[names[0]][0]]
    ys = [VERTICES[n][1] for n in names] + [VERTICES[names[0]][1]]
    ax.plot(xs, ys, color=out_col, linewidth=out_lwd, zorder=1)

    if labels:
        offsets = {"S": (-10, -10), "M": (0, 6), "L": (4, -10)}
        for name, (vx, vy) in VERTICES.items():
            ax.annotate(name, (vx, vy), xytext=offsets[name], textcoords="offset points", ha="center")
    if achro:
        ax.scatter([0], [0], color=achrocol, s=achrosize, marker="s", zorder=2)

    tripoints(clrspdata, ax, **{"zorder": 3, **kwargs})
    ax.set_xlim(-0.8, 0.8)
    ax.set_ylim(-0.5, 0.9)
    strip_axes(ax)
    return ax

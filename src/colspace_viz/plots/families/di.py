from __future__ import annotations

import numpy as np
import pandas as pd

from colspace_viz.spaces import Space, require_columns

from ._axes import get_axes, point_kwargs, strip_axes

COLUMNS = ("x",)
HALF = 1 / np.sqrt(2)


def dipoints(clrspdata: pd.DataFrame, ax, **kwargs):
    require_columns(clrspdata, COLUMNS, Space.DISPACE)
    x = clrspdata["x"].to_numpy(dtype=float)
    ax.scatter(x, np.zeros_like(x), **point_kwargs(kwargs))
    return ax


def diplot(
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
    """Plot a dichromat colourspace: receptor excitations on a segment.

    Extra keyword arguments go to ``Axes.scatter``.
    """
    require_columns(clrspdata, COLUMNS, Space.DISPACE)
    ax = get_axes(ax, figsize=(6, 2))

    ax.plot([-HALF, HALF], [0, 0], color=out_col, linewidth=out_lwd, zorder=1)
    ax.scatter([-HALF, HALF], [0, 0], color=out_col, s=15, zorder=1)
    if labels:
        ax.annotate("S", (-HALF, 0), xytext=(-12, 0), textcoords="offset points", va="center")
        ax.annotate("L", (HALF, 0), xytext=(6, 0), textcoords="offset points", va="center")
    if achro:
        ax.scatter([0], [0], color=achrocol, s=achrosize, marker="s", zorder=2)

    dipoints(clrspdata, ax, **{"zorder": 3, **kwargs})
    ax.set_xlim(-HALF * 1.15, HALF * 1.15)
    ax.set_ylim(-0.5, 0.5)
    strip_axes(ax)
    return ax

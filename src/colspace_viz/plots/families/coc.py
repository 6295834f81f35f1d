from __future__ import annotations

import pandas as pd

from colspace_viz.spaces import Space, require_columns

from ._axes import get_axes, point_kwargs

COLUMNS = ("x", "y")
LIMIT = 12


def cocpoints(clrspdata: pd.DataFrame, ax, **kwargs):
    require_columns(clrspdata, COLUMNS, Space.COC)
    ax.scatter(clrspdata["x"].to_numpy(dtype=float), clrspdata["y"].to_numpy(dtype=float), **point_kwargs(kwargs))
    return ax


def cocplot(
    clrspdata: pd.DataFrame,
    ax=None,
    *,
    labels: bool = True,
    out_lwd: float = 1.0,
    out_col: str = "black",
    **kwargs,
):
    """Plot the colour-opponent-coding space (Backhaus 1991).

    Opponent channel A on the horizontal axis, B on the vertical, both
    spanning -12..12.
    """
    require_columns(clrspdata, COLUMNS, Space.COC)
    ax = get_axes(ax, figsize=(5, 5))

    ax.axhline(0, color=out_col, linewidth=out_lwd, zorder=1)
    ax.axvline(0, color=out_col, linewidth=out_lwd, zorder=1)
    ax.set_xlim(-LIMIT, LIMIT)
    ax.set_ylim(-LIMIT, LIMIT)
    ax.set_aspect("equal")
    if labels:
        ax.set_xlabel("A")
        ax.set_ylabel("B")

    cocpoints(clrspdata, ax, **{"zorder": 3, **kwargs})
    return ax

from __future__ import annotations

import logging
from itertools import combinations

import numpy as np
import pandas as pd

from colspace_viz.spaces import Space, require_columns

from ._axes import get_axes, point_kwargs

logger = logging.getLogger(__name__)

COLUMNS = ("x", "y", "z")

# Tetrahedron vertices for the u, s, m, l receptors (Stoddard & Prum 2008)
VERTICES = {
    "u": (0.0, 0.0, 0.75),
    "s": (-0.6124, -0.3536, -0.25),
    "m": (0.0, 0.7071, -0.25),
    "l": (0.6124, -0.3536, -0.25),
}
VERTEX_COLORS = {"u": "darkorchid", "s": "darkblue", "m": "darkgreen", "l": "darkred"}


def _xyz(clrspdata: pd.DataFrame) -> np.ndarray:
    require_columns(clrspdata, COLUMNS, Space.TCS)
    return clrspdata.loc[:, list(COLUMNS)].to_numpy(dtype=float)


def tcspoints(clrspdata: pd.DataFrame, ax, **kwargs):
    xyz = _xyz(clrspdata)
    ax.scatter(xyz[:, 0], xyz[:, 1], xyz[:, 2], **point_kwargs(kwargs))
    return ax


def tcsplot(
    clrspdata: pd.DataFrame,
    ax=None,
    *,
    achro: bool = True,
    labels: bool = True,
    achrocol: str = "grey",
    achrosize: float = 40,
    vertexsize: float = 60,
    out_lwd: float = 1.0,
    out_col: str = "grey",
    elev: float | None = None,
    azim: float | None = None,
    **kwargs,
):
    """Plot a tetrahedral colourspace on 3D axes.

    Parameters
    ----------
    clrspdata : pandas.DataFrame
        Result with cartesian ``x``, ``y``, ``z`` coordinates.
    ax : Axes3D, optional
        Existing 3D axes; a new figure is created when omitted.
    elev, azim : float, optional
        Initial view angles.
    **kwargs
        Forwarded to ``Axes3D.scatter`` for the data points.
    """
    require_columns(clrspdata, COLUMNS, Space.TCS)
    ax = get_axes(ax, projection="3d", figsize=(6, 6))

    for a, b in combinations(VERTICES, 2):
        pa, pb = VERTICES[a], VERTICES[b]
        ax.plot(*zip(pa, pb), color=out_col, linewidth=out_lwd)
    for name, pos in VERTICES.items():
        ax.scatter([pos[0]], [pos[1]], [pos[2]], color=VERTEX_COLORS[name], s=vertexsize, depthshade=False)
        if labels:
            ax.text(pos[0] * 1.1, pos[1] * 1.1, pos[2] * 1.1, name)
    if achro:
        ax.scatter([0], [0], [0], color=achrocol, s=achrosize, marker="s", depthshade=False)

    tcspoints(clrspdata, ax, **kwargs)
    ax.set_xlim(-0.7, 0.7)
    ax.set_ylim(-0.7, 0.7)
    ax.set_zlim(-0.3, 0.8)
    ax.set_box_aspect((1, 1, 0.8))
    ax.set_axis_off()
    if elev is not None or azim is not None:
        ax.view_init(elev=elev, azim=azim)
    return ax


def tcsvol(
    clrspdata: pd.DataFrame,
    ax=None,
    *,
    fill: bool = True,
    col: str = "black",
    alpha: float = 0.2,
    grid: bool = True,
    lwd: float = 0.5,
):
    """Draw the convex hull of a tetrahedral result (colour volume)."""
    from mpl_toolkits.mplot3d.art3d import Poly3DCollection
    from scipy.spatial import ConvexHull, QhullError

    xyz = _xyz(clrspdata)
    if len(xyz) < 4:
        raise ValueError(f"Colour volume needs at least 4 points, got {len(xyz)}")

    try:
        hull = ConvexHull(xyz)
    except QhullError as exc:
        raise ValueError("Colour volume needs points spanning 3D; got coplanar or duplicate points") from exc
    logger.debug("[plots] tcs volume=%.6g facets=%d", hull.volume, len(hull.simplices))

    ax = get_axes(ax, projection="3d", figsize=(6, 6))
    faces = Poly3DCollection(
        [xyz[simplex] for simplex in hull.simplices],
        facecolor=col if fill else "none",
        edgecolor=col if grid else "none",
        alpha=alpha,
        linewidths=lwd,
    )
    ax.add_collection3d(faces)
    return ax

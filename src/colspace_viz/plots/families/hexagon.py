from __future__ import annotations

import numpy as np
import pandas as pd

from colspace_viz.spaces import Space, require_columns

from ._axes import get_axes, point_kwargs, strip_axes

COLUMNS = ("x", "y")
SECTORS = ("none", "coarse", "fine")

# Photoreceptor vertices E1 (s), E2 (m), E3 (l)
RECEPTORS = {
    "E1": (-np.sqrt(3) / 2, -0.5),
    "E2": (0.0, 1.0),
    "E3": (np.sqrt(3) / 2, -0.5),
}


def hexagon_vertices() -> np.ndarray:
    """Unit hexagon corners, starting at the top and running clockwise."""
    angles = np.deg2rad(90 - 60 * np.arange(6))
    return np.column_stack([np.cos(angles), np.sin(angles)])


def hexpoints(clrspdata: pd.DataFrame, ax, **kwargs):
    require_columns(clrspdata, COLUMNS, Space.HEXAGON)
    ax.scatter(clrspdata["x"].to_numpy(dtype=float), clrspdata["y"].to_numpy(dtype=float), **point_kwargs(kwargs))
    return ax


def _sector_lines(ax, sectors: str, color: str, linewidth: float) -> None:
    if sectors == "none":
        return
    if sectors == "coarse":
        # receptor axes and their opponent directions
        angles = np.deg2rad(90 - 60 * np.arange(6))
        radius = 1.0
    else:
        angles = np.deg2rad(np.arange(0, 360, 10))
        # reach the hexagon edge: apothem / cos(offset from nearest edge normal)
        offset = (np.rad2deg(angles) + 30) % 60 - 30
        radius = (np.sqrt(3) / 2) / np.cos(np.deg2rad(offset))
    xs = radius * np.cos(angles)
    ys = radius * np.sin(angles)
    for x, y in zip(xs, ys):
        ax.plot([0, x], [0, y], color=color, linewidth=linewidth, linestyle="--", zorder=1)


def hexplot(
    clrspdata: pd.DataFrame,
    ax=None,
    *,
    achro: bool = True,
    labels: bool = True,
    sectors: str = "none",
    sec_col: str = "grey",
    achrocol: str = "grey",
    achrosize: float = 40,
    out_lwd: float = 1.0,
    out_col: str = "black",
    **kwargs,
):
    """Plot a colour hexagon (Chittka 1992).

    ``sectors`` draws hue sector boundaries: ``"coarse"`` the six receptor and
    opponent axes, ``"fine"`` 36 radial lines at 10 degree steps.
    """
    if sectors not in SECTORS:
        raise ValueError(f"Unknown sectors='{sectors}'. Options: {list(SECTORS)}")
    require_columns(clrspdata, COLUMNS, Space.HEXAGON)
    ax = get_axes(ax, figsize=(5, 5))

    verts = hexagon_vertices()
    closed = np.vstack([verts, verts[:1]])
    ax.plot(closed[:, 0], closed[:, 1], color=out_col, linewidth=out_lwd, zorder=1)
    _sector_lines(ax, sectors, sec_col, out_lwd * 0.6)

    if labels:
        for name, (vx, vy) in RECEPTORS.items():
            ax.annotate(name, (vx, vy), xytext=(1.12 * vx, 1.12 * vy), textcoords="data", ha="center", va="center")
    if achro:
        ax.scatter([0], [0], color=achrocol, s=achrosize, marker="s", zorder=2)

    hexpoints(clrspdata, ax, **{"zorder": 3, **kwargs})
    ax.set_xlim(-1.2, 1.2)
    ax.set_ylim(-1.2, 1.2)
    strip_axes(ax)
    return ax

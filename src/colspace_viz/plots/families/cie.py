from __future__ import annotations

import numpy as np
import pandas as pd

from colspace_viz.spaces import Space, get_space, parse_space, require_columns

from ._axes import get_axes, point_kwargs

XYZ_COLUMNS = ("x", "y")
LAB_COLUMNS = ("L", "a", "b")

# CIE 1931 2-degree observer chromaticity (x, y), 380-700 nm in 10 nm steps
SPECTRAL_LOCUS = np.array(
    [
        (0.1741, 0.0050),
        (0.1738, 0.0049),
        (0.1733, 0.0048),
        (0.1726, 0.0048),
        (0.1714, 0.0051),
        (0.1689, 0.0069),
        (0.1644, 0.0109),
        (0.1566, 0.0177),
        (0.1440, 0.0297),
        (0.1241, 0.0578),
        (0.0913, 0.1327),
        (0.0454, 0.2950),
        (0.0082, 0.5384),
        (0.0139, 0.7502),
        (0.0743, 0.8338),
        (0.1547, 0.8059),
        (0.2296, 0.7543),
        (0.3016, 0.6923),
        (0.3731, 0.6245),
        (0.4441, 0.5547),
        (0.5125, 0.4866),
        (0.5752, 0.4242),
        (0.6270, 0.3725),
        (0.6658, 0.3340),
        (0.6915, 0.3083),
        (0.7079, 0.2920),
        (0.7190, 0.2809),
        (0.7260, 0.2740),
        (0.7300, 0.2700),
        (0.7320, 0.2680),
        (0.7334, 0.2666),
        (0.7344, 0.2656),
        (0.7347, 0.2653),
    ]
)
LOCUS_WAVELENGTHS = np.arange(380, 701, 10)
WHITE_POINT = (1 / 3, 1 / 3)


def _resolve(clrspdata: pd.DataFrame, space: Space | str | None) -> Space:
    resolved = get_space(clrspdata) if space is None else parse_space(space)
    if resolved not in (Space.CIEXYZ, Space.CIELAB):
        raise ValueError(f"cieplot expects CIEXYZ or CIELAB data, got {resolved.value}")
    return resolved


def ciepoints(clrspdata: pd.DataFrame, ax, *, space: Space | str | None = None, **kwargs):
    if _resolve(clrspdata, space) is Space.CIELAB:
        require_columns(clrspdata, LAB_COLUMNS, Space.CIELAB)
        ax.scatter(
            clrspdata["a"].to_numpy(dtype=float),
            clrspdata["b"].to_numpy(dtype=float),
            clrspdata["L"].to_numpy(dtype=float),
            **point_kwargs(kwargs),
        )
    else:
        require_columns(clrspdata, XYZ_COLUMNS, Space.CIEXYZ)
        ax.scatter(clrspdata["x"].to_numpy(dtype=float), clrspdata["y"].to_numpy(dtype=float), **point_kwargs(kwargs))
    return ax


def _xyz_diagram(ax, labels: bool, out_col: str, out_lwd: float) -> None:
    closed = np.vstack([SPECTRAL_LOCUS, SPECTRAL_LOCUS[:1]])
    ax.plot(closed[:, 0], closed[:, 1], color=out_col, linewidth=out_lwd, zorder=1)
    ax.scatter([WHITE_POINT[0]], [WHITE_POINT[1]], color="grey", s=30, marker="s", zorder=2)
    if labels:
        for wl, (x, y) in zip(LOCUS_WAVELENGTHS, SPECTRAL_LOCUS):
            if wl in (460, 480, 500, 520, 540, 560, 580, 600, 620):
                ax.annotate(f"{wl}", (x, y), xytext=(4, 2), textcoords="offset points", fontsize=7)
        ax.set_xlabel("x")
        ax.set_ylabel("y")
    ax.set_xlim(0, 0.8)
    ax.set_ylim(0, 0.9)
    ax.set_aspect("equal")


def _lab_axes(ax, labels: bool, out_col: str, out_lwd: float) -> None:
    ax.plot([-128, 128], [0, 0], [50, 50], color=out_col, linewidth=out_lwd)
    ax.plot([0, 0], [-128, 128], [50, 50], color=out_col, linewidth=out_lwd)
    ax.plot([0, 0], [0, 0], [0, 100], color=out_col, linewidth=out_lwd)
    ax.set_xlim(-128, 128)
    ax.set_ylim(-128, 128)
    ax.set_zlim(0, 100)
    if labels:
        ax.set_xlabel("a*")
        ax.set_ylabel("b*")
        ax.set_zlabel("L")


def cieplot(
    clrspdata: pd.DataFrame,
    ax=None,
    *,
    space: Space | str | None = None,
    labels: bool = True,
    out_lwd: float = 1.0,
    out_col: str = "black",
    elev: float | None = None,
    azim: float | None = None,
    **kwargs,
):
    """Plot CIE data.

    CIEXYZ results are drawn in the 1931 xy chromaticity diagram bounded by the
    spectral locus; CIELAB results on 3D a*/b*/L axes. The variant comes from
    the result's tag unless ``space`` is given.
    """
    resolved = _resolve(clrspdata, space)
    if resolved is Space.CIELAB:
        require_columns(clrspdata, LAB_COLUMNS, Space.CIELAB)
        ax = get_axes(ax, projection="3d", figsize=(6, 6))
        _lab_axes(ax, labels, out_col, out_lwd)
        if elev is not None or azim is not None:
            ax.view_init(elev=elev, azim=azim)
    else:
        require_columns(clrspdata, XYZ_COLUMNS, Space.CIEXYZ)
        ax = get_axes(ax, figsize=(5, 5))
        _xyz_diagram(ax, labels, out_col, out_lwd)
        kwargs = {"zorder": 3, **kwargs}

    ciepoints(clrspdata, ax, space=resolved, **kwargs)
    return ax

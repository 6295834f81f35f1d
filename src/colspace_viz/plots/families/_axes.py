from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import matplotlib.pyplot as plt

# Defaults shared by every family; caller kwargs win.
POINT_DEFAULTS: Mapping[str, Any] = {"s": 20, "c": "black", "alpha": 0.8}


def get_axes(ax=None, *, projection: str | None = None, figsize: tuple[float, float] | None = None):
    if ax is not None:
        return ax
    fig = plt.figure(figsize=figsize)
    if projection is None:
        return fig.add_subplot()
    return fig.add_subplot(projection=projection)


def point_kwargs(kwargs: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(POINT_DEFAULTS)
    # matplotlib rejects c and color together
    if "color" in kwargs:
        merged.pop("c")
    merged.update(kwargs)
    return merged


def strip_axes(ax) -> None:
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)

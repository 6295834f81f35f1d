from __future__ import annotations

import logging
from typing import Any

from colspace_viz.spaces import Space, get_space

from .registry import get_points_renderer, get_renderer

logger = logging.getLogger(__name__)


def plot_colspace(clrspdata: Any, **kwargs: Any) -> Any:
    """Plot a colourspace result in the geometry its tag names.

    Parameters
    ----------
    clrspdata: pandas.DataFrame
        A result tagged with ``attrs["clrsp"]`` (see `make_colspace`).
    **kwargs
        Options for the selected renderer, forwarded unchanged:
        ``diplot`` (dispace), ``triplot`` (trispace), ``hexplot`` (hexagon),
        ``tcsplot`` (tcs), ``cocplot`` (coc), ``catplot`` (categorical),
        ``cieplot`` (CIEXYZ, CIELAB).

    Returns
    -------
    Whatever the renderer returns (the matplotlib Axes drawn on).

    Raises
    ------
    UnknownSpaceError
        If the tag is missing or not a recognised space.
    """
    space = get_space(clrspdata)
    renderer = get_renderer(space)
    logger.debug("[plots] dispatch space=%s renderer=%s", space.value, getattr(renderer, "__name__", renderer))
    return renderer(clrspdata, **kwargs)


def points_colspace(clrspdata: Any, ax: Any, **kwargs: Any) -> Any:
    """Add the points of a result to axes returned by `plot_colspace`."""
    space = get_space(clrspdata)
    logger.debug("[plots] points space=%s n=%d", space.value, len(clrspdata))
    return get_points_renderer(space)(clrspdata, ax, **kwargs)


def vol_colspace(clrspdata: Any, ax: Any = None, **kwargs: Any) -> Any:
    """Draw the colour volume (convex hull) of a tetrahedral result."""
    space = get_space(clrspdata)
    if space is not Space.TCS:
        raise ValueError(f"Colour volume is only defined for space='tcs', got '{space.value}'")

    from .families.tcs import tcsvol

    return tcsvol(clrspdata, ax, **kwargs)

"""Dispatch tables from colourspace tag to family routine.

Entries are thin wrappers that import their family on first call, which keeps
matplotlib out of `import colspace_viz`. Both tables must stay keyed on every
`Space` member.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from colspace_viz.spaces import Space


def _diplot(clrspdata, **kwargs):
    from .families.di import diplot as _p

    return _p(clrspdata, **kwargs)


def _triplot(clrspdata, **kwargs):
    from .families.tri import triplot as _p

    return _p(clrspdata, **kwargs)


def _hexplot(clrspdata, **kwargs):
    from .families.hexagon import hexplot as _p

    return _p(clrspdata, **kwargs)


def _tcsplot(clrspdata, **kwargs):
    from .families.tcs import tcsplot as _p

    return _p(clrspdata, **kwargs)


def _cocplot(clrspdata, **kwargs):
    from .families.coc import cocplot as _p

    return _p(clrspdata, **kwargs)


def _catplot(clrspdata, **kwargs):
    from .families.categorical import catplot as _p

    return _p(clrspdata, **kwargs)


def _cieplot(clrspdata, **kwargs):
    from .families.cie import cieplot as _p

    return _p(clrspdata, **kwargs)


DISPATCH: dict[Space, Callable[..., Any]] = {
    Space.DISPACE: _diplot,
    Space.TRISPACE: _triplot,
    Space.HEXAGON: _hexplot,
    Space.TCS: _tcsplot,
    Space.COC: _cocplot,
    Space.CATEGORICAL: _catplot,
    Space.CIEXYZ: _cieplot,
    Space.CIELAB: _cieplot,
}


def _dipoints(clrspdata, ax, **kwargs):
    from .families.di import dipoints as _p

    return _p(clrspdata, ax, **kwargs)


def _tripoints(clrspdata, ax, **kwargs):
    from .families.tri import tripoints as _p

    return _p(clrspdata, ax, **kwargs)


def _hexpoints(clrspdata, ax, **kwargs):
    from .families.hexagon import hexpoints as _p

    return _p(clrspdata, ax, **kwargs)


def _tcspoints(clrspdata, ax, **kwargs):
    from .families.tcs import tcspoints as _p

    return _p(clrspdata, ax, **kwargs)


def _cocpoints(clrspdata, ax, **kwargs):
    from .families.coc import cocpoints as _p

    return _p(clrspdata, ax, **kwargs)


def _catpoints(clrspdata, ax, **kwargs):
    from .families.categorical import catpoints as _p

    return _p(clrspdata, ax, **kwargs)


def _ciepoints(clrspdata, ax, **kwargs):
    from .families.cie import ciepoints as _p

    return _p(clrspdata, ax, **kwargs)


POINTS_DISPATCH: dict[Space, Callable[..., Any]] = {
    Space.DISPACE: _dipoints,
    Space.TRISPACE: _tripoints,
    Space.HEXAGON: _hexpoints,
    Space.TCS: _tcspoints,
    Space.COC: _cocpoints,
    Space.CATEGORICAL: _catpoints,
    Space.CIEXYZ: _ciepoints,
    Space.CIELAB: _ciepoints,
}


def get_renderer(space: Space) -> Callable[..., Any]:
    return DISPATCH[space]


def get_points_renderer(space: Space) -> Callable[..., Any]:
    return POINTS_DISPATCH[space]

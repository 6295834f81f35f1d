from .plots import plot_colspace, points_colspace, vol_colspace
from .spaces import MissingCoordinatesError, Space, UnknownSpaceError, get_space, make_colspace

__all__ = [
    "MissingCoordinatesError",
    "Space",
    "UnknownSpaceError",
    "get_space",
    "make_colspace",
    "plot_colspace",
    "points_colspace",
    "vol_colspace",
]

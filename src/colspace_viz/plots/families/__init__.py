"""One module per colourspace geometry.

Each exposes a ``*plot`` renderer that draws the space and its data, and a
``*points`` routine that adds data to axes the renderer returned.
"""

from .categorical import catplot, catpoints
from .cie import cieplot, ciepoints
from .coc import cocplot, cocpoints
from .di import diplot, dipoints
from .hexagon import hexplot, hexpoints
from .tcs import tcsplot, tcspoints, tcsvol
from .tri import triplot, tripoints

__all__ = [
    "catplot",
    "catpoints",
    "cieplot",
    "ciepoints",
    "cocplot",
    "cocpoints",
    "diplot",
    "dipoints",
    "hexplot",
    "hexpoints",
    "tcsplot",
    "tcspoints",
    "tcsvol",
    "triplot",
    "tripoints",
]

"""Colourspace tags and the tagged-DataFrame carrier.

A colourspace result is a ``pandas.DataFrame`` of per-sample coordinates whose
``attrs["clrsp"]`` names the model that produced them.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

import pandas as pd

CLRSP_ATTR = "clrsp"


class Space(str, Enum):
    DISPACE = "dispace"
    TRISPACE = "trispace"
    HEXAGON = "hexagon"
    TCS = "tcs"
    COC = "coc"
    CATEGORICAL = "categorical"
    CIEXYZ = "CIEXYZ"
    CIELAB = "CIELAB"

    def __str__(self) -> str:
        return self.value


class UnknownSpaceError(ValueError):
    """Raised when a result carries no tag or a tag outside `Space`."""


class MissingCoordinatesError(KeyError):
    """Raised when a result lacks the columns its renderer needs."""

    def __init__(self, space: Space | str, missing: Iterable[str]) -> None:
        self.space = str(space)
        self.missing = list(missing)
        super().__init__(f"space={self.space} missing columns: {self.missing}")

    def __str__(self) -> str:
        return self.args[0]


def parse_space(value: Any) -> Space:
    """Resolve a tag value (string or `Space`) to a `Space` member."""
    if isinstance(value, Space):
        return value
    try:
        return Space(str(value))
    except ValueError:
        options = [s.value for s in Space]
        raise UnknownSpaceError(f"Unknown colourspace '{value}'. Options: {options}") from None


def get_space(clrspdata: Any) -> Space:
    """Read the colourspace tag from a result.

    Parameters
    ----------
    clrspdata : pandas.DataFrame or object
        A tagged DataFrame (``attrs["clrsp"]``), or any object exposing a
        ``clrsp`` attribute.

    Returns
    -------
    Space
        The validated tag.
    """
    if isinstance(clrspdata, pd.DataFrame):
        tag = clrspdata.attrs.get(CLRSP_ATTR)
    else:
        tag = getattr(clrspdata, CLRSP_ATTR, None)
    if tag is None:
        raise UnknownSpaceError(f"Object of type {type(clrspdata).__name__} carries no '{CLRSP_ATTR}' tag")
    return parse_space(tag)


def make_colspace(data: pd.DataFrame | dict, space: Space | str) -> pd.DataFrame:
    """Return a tagged copy of `data`; the input is left untouched."""
    df = pd.DataFrame(data).copy()
    df.attrs[CLRSP_ATTR] = parse_space(space).value
    return df


def require_columns(clrspdata: pd.DataFrame, columns: Iterable[str], space: Space | str) -> None:
    missing = [c for c in columns if c not in clrspdata.columns]
    if missing:
        raise MissingCoordinatesError(space, missing)

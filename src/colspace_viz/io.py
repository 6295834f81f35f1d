from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .spaces import CLRSP_ATTR, Space, get_space, make_colspace, parse_space

logger = logging.getLogger(__name__)


def read_colspace(path: str | Path, space: Space | str | None = None, **read_kwargs) -> pd.DataFrame:
    """Load a colourspace result from CSV.

    Parameters
    ----------
    path : str | Path
        CSV file with one row per sample.
    space : Space | str, optional
        Tag to apply. When omitted, the file must carry a ``clrsp`` column
        holding a single tag for every row; the column is dropped.
    **read_kwargs
        Passed to ``pandas.read_csv``.

    Returns
    -------
    pd.DataFrame
        Tagged result.
    """
    df = pd.read_csv(path, **read_kwargs)

    if CLRSP_ATTR in df.columns:
        tags = df[CLRSP_ATTR].dropna().unique().tolist()
        df = df.drop(columns=[CLRSP_ATTR])
        if space is None:
            if len(tags) != 1:
                raise ValueError(f"{path}: '{CLRSP_ATTR}' column must hold exactly one space, found {tags}")
            space = tags[0]
        elif tags and {str(t) for t in tags} != {parse_space(space).value}:
            logger.warning("[io] %s: explicit space=%s overrides file tags %s", path, space, tags)

    if space is None:
        raise ValueError(f"{path}: no '{CLRSP_ATTR}' column and no space given")

    out = make_colspace(df, space)
    logger.info("[io] loaded %d rows space=%s from %s", len(out), out.attrs[CLRSP_ATTR], path)
    return out


def write_colspace(clrspdata: pd.DataFrame, path: str | Path, **to_csv_kwargs) -> Path:
    """Write a tagged result to CSV, storing the tag as a ``clrsp`` column."""
    space = get_space(clrspdata)
    out = clrspdata.copy()
    out[CLRSP_ATTR] = space.value
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(path, **{"index": False, **to_csv_kwargs})
    return path

"""Colourspace plotting package.

Exposes the dispatch entrypoints. Families are registered in `registry.py`.
Keep the surface area small and explicit.
"""

from .orchestrator import plot_colspace, points_colspace, vol_colspace

__all__ = ["plot_colspace", "points_colspace", "vol_colspace"]

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any


def ensure_figures_dir(out_dir: str | Path, cfg: Mapping[str, Any]) -> Path:
    root = Path(out_dir)
    sub = str(cfg.get("figures_subdir", "figures"))
    out = root / sub if sub else root
    out.mkdir(parents=True, exist_ok=True)
    return out


def build_filename(
    *,
    cfg: Mapping[str, Any],
    space: str,
    stem: str,
) -> str:
    pat = str(cfg.get("file_naming", "{space}-{stem}"))
    return pat.format(space=space, stem=stem)


def save_figure(fig, figures_dir: Path, base_name: str, cfg: Mapping[str, Any]) -> Path:
    fmt = str(cfg.get("fig_format", "png"))
    dpi = int(cfg.get("dpi", 150))
    path = Path(figures_dir) / f"{base_name}.{fmt}"
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    return path

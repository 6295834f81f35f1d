from __future__ import annotations

import logging
from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf

logger = logging.getLogger(__name__)


def run(cfg: DictConfig) -> Path:
    """Load a colourspace CSV, plot it and save the figure.

    Usage:
        python -m colspace_viz input=/path/to/tcs.csv
        python -m colspace_viz input=flowers.csv space=hexagon +plot.sectors=coarse
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from colspace_viz.io import read_colspace
    from colspace_viz.plots import plot_colspace, vol_colspace
    from colspace_viz.plots.io_utils import build_filename, ensure_figures_dir, save_figure

    input_path = cfg.get("input")
    if not input_path:
        raise ValueError("Missing 'input' in config. Provide input=<path/to/colspace.csv>")

    clrspdata = read_colspace(str(input_path), space=cfg.get("space") or None)
    space = clrspdata.attrs["clrsp"]

    plot_opts = OmegaConf.to_container(cfg.get("plot") or OmegaConf.create({}), resolve=True)
    ax = plot_colspace(clrspdata, **plot_opts)
    if cfg.get("vol", False):
        vol_colspace(clrspdata, ax)

    out_dir = cfg.get("output") or Path(str(input_path)).parent
    figures_dir = ensure_figures_dir(str(out_dir), cfg)
    fname = build_filename(cfg=cfg, space=space, stem=Path(str(input_path)).stem)
    path = save_figure(ax.figure, figures_dir, fname, cfg)
    plt.close(ax.figure)
    logger.info("[plots] saved space=%s -> %s", space, path)
    return path


@hydra.main(config_path="../../configs", config_name="config", version_base="1.3")
def main(cfg: DictConfig) -> None:
    run(cfg)


if __name__ == "__main__":
    main()

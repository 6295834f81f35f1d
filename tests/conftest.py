from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from colspace_viz.spaces import Space, make_colspace  # noqa: E402

SAMPLES = {
    Space.DISPACE: {"s": [0.2, 0.6, 0.5], "l": [0.8, 0.4, 0.5], "x": [0.42, -0.14, 0.0]},
    Space.TRISPACE: {"x": [0.1, -0.2, 0.3], "y": [0.05, 0.2, -0.1]},
    Space.HEXAGON: {"x": [0.1, -0.3, 0.25], "y": [0.2, -0.1, 0.05]},
    Space.TCS: {
        "x": [0.10, -0.15, 0.05, 0.02, 0.0],
        "y": [-0.05, 0.10, 0.20, -0.12, 0.01],
        "z": [0.05, -0.10, 0.00, 0.15, -0.02],
    },
    Space.COC: {"x": [1.5, -3.2, 6.0], "y": [-2.0, 4.1, 0.3]},
    Space.CATEGORICAL: {"x": [0.3, -0.4, 0.1], "y": [-0.2, 0.5, 0.6]},
    Space.CIEXYZ: {"x": [0.31, 0.45, 0.25], "y": [0.33, 0.41, 0.28]},
    Space.CIELAB: {"L": [50.0, 72.5, 31.0], "a": [10.0, -22.0, 40.0], "b": [-5.0, 18.0, 12.0]},
}


def sample_colspace(space: Space):
    return make_colspace(SAMPLES[space], space)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture(params=list(Space), ids=lambda s: s.value)
def any_colspace(request):
    return sample_colspace(request.param)


@pytest.fixture
def sample():
    return sample_colspace

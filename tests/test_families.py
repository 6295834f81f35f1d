"""Tests for the per-space renderers.

Covers the geometry constants each family draws, option handling, and the
shared contract: draw on the given axes, leave the input untouched, and report
missing coordinate columns.
"""

from __future__ import annotations

from itertools import combinations

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from colspace_viz import MissingCoordinatesError, plot_colspace
from colspace_viz.plots.families import catplot, cieplot, cocplot, diplot, hexplot, tcsplot, triplot
from colspace_viz.plots.families import cie as cie_family
from colspace_viz.plots.families import hexagon as hex_family
from colspace_viz.plots.families import tcs as tcs_family
from colspace_viz.plots.families import tri as tri_family
from colspace_viz.spaces import CLRSP_ATTR, Space, make_colspace


class TestSharedContract:
    def test_input_not_mutated(self, any_colspace):
        before = any_colspace.copy()
        plot_colspace(any_colspace, color="blue")
        pd.testing.assert_frame_equal(any_colspace, before)
        assert any_colspace.attrs[CLRSP_ATTR] == before.attrs[CLRSP_ATTR]

    def test_missing_columns_raise(self):
        for space in Space:
            df = make_colspace({"unrelated": [1.0, 2.0]}, space)
            with pytest.raises(MissingCoordinatesError) as exc:
                plot_colspace(df)
            assert exc.value.space == space.value
            assert exc.value.missing

    def test_missing_columns_is_key_error(self):
        df = make_colspace({"y": [0.1]}, Space.DISPACE)
        with pytest.raises(KeyError, match="x"):
            plot_colspace(df)

    def test_draws_on_supplied_axes(self, sample):
        fig, ax = plt.subplots()
        out = triplot(sample(Space.TRISPACE), ax=ax)
        assert out is ax
        assert out.figure is fig


class TestDichromat:
    def test_points_lie_on_segment(self, sample):
        df = sample(Space.DISPACE)
        ax = diplot(df)
        offsets = np.asarray(ax.collections[-1].get_offsets())
        np.testing.assert_allclose(offsets[:, 0], df["x"].to_numpy())
        np.testing.assert_allclose(offsets[:, 1], 0.0)

    def test_scatter_kwargs_forwarded(self, sample):
        ax = diplot(sample(Space.DISPACE), s=99)
        sizes = ax.collections[-1].get_sizes()
        assert np.all(sizes == 99)

    def test_labels_toggle(self, sample):
        ax = diplot(sample(Space.DISPACE), labels=False)
        assert not ax.texts
        ax = diplot(sample(Space.DISPACE), labels=True)
        assert {t.get_text() for t in ax.texts} == {"S", "L"}


class TestTrichromat:
    def test_triangle_is_equilateral_and_centred(self):
        pts = np.array(list(tri_family.VERTICES.values()))
        sides = [np.linalg.norm(a - b) for a, b in combinations(pts, 2)]
        np.testing.assert_allclose(sides, np.sqrt(2))
        np.testing.assert_allclose(pts.mean(axis=0), 0.0, atol=1e-12)

    def test_achro_marker(self, sample):
        with_achro = triplot(sample(Space.TRISPACE), achro=True)
        without = triplot(sample(Space.TRISPACE), achro=False)
        assert len(with_achro.collections) == len(without.collections) + 1


class TestHexagon:
    def test_vertices_on_unit_circle(self):
        verts = hex_family.hexagon_vertices()
        assert verts.shape == (6, 2)
        np.testing.assert_allclose(np.hypot(verts[:, 0], verts[:, 1]), 1.0)

    def test_receptors_are_hexagon_corners(self):
        verts = hex_family.hexagon_vertices()
        for rx, ry in hex_family.RECEPTORS.values():
            assert np.min(np.hypot(verts[:, 0] - rx, verts[:, 1] - ry)) < 1e-12

    @pytest.mark.parametrize(("sectors", "n_lines"), [("none", 1), ("coarse", 7), ("fine", 37)])
    def test_sector_lines(self, sample, sectors, n_lines):
        ax = hexplot(sample(Space.HEXAGON), sectors=sectors)
        assert len(ax.lines) == n_lines

    def test_fine_sectors_end_on_outline(self, sample):
        ax = hexplot(sample(Space.HEXAGON), sectors="fine")
        apothem = np.sqrt(3) / 2
        for line in ax.lines[1:]:
            x, y = line.get_xdata()[1], line.get_ydata()[1]
            r = np.hypot(x, y)
            assert apothem - 1e-9 <= r <= 1.0 + 1e-9

    def test_unknown_sectors_raise(self, sample):
        with pytest.raises(ValueError, match="sectors"):
            hexplot(sample(Space.HEXAGON), sectors="medium")


class TestTetrahedral:
    def test_vertices_equidistant_from_centre(self):
        pts = np.array(list(tcs_family.VERTICES.values()))
        np.testing.assert_allclose(np.linalg.norm(pts, axis=1), 0.75, atol=1e-3)

    def test_uses_3d_axes(self, sample):
        ax = tcsplot(sample(Space.TCS))
        assert ax.name == "3d"

    def test_view_angles(self, sample):
        ax = tcsplot(sample(Space.TCS), elev=10, azim=45)
        assert ax.elev == 10
        assert ax.azim == 45

    def test_vol_without_axes_creates_3d(self, sample):
        ax = tcs_family.tcsvol(sample(Space.TCS), fill=False)
        assert ax.name == "3d"
        assert len(ax.collections) == 1


class TestCategorical:
    def test_quadrant_labels(self, sample):
        ax = catplot(sample(Space.CATEGORICAL))
        assert {t.get_text() for t in ax.texts} == {"p-y+", "y-y+", "p-y-", "y-y-"}


class TestCOC:
    def test_opponent_axes_limits_and_labels(self, sample):
        ax = cocplot(sample(Space.COC))
        assert ax.get_xlim() == (-12, 12)
        assert ax.get_ylim() == (-12, 12)
        assert ax.get_xlabel() == "A"
        assert ax.get_ylabel() == "B"

    def test_labels_toggle(self, sample):
        ax = cocplot(sample(Space.COC), labels=False)
        assert ax.get_xlabel() == ""
        assert ax.get_ylabel() == ""


class TestCIE:
    def test_locus_closed_by_purple_line(self, sample):
        ax = cieplot(sample(Space.CIEXYZ))
        locus = ax.lines[0]
        xs, ys = locus.get_xdata(), locus.get_ydata()
        assert len(xs) == len(cie_family.SPECTRAL_LOCUS) + 1
        assert (xs[-1], ys[-1]) == (xs[0], ys[0])
        np.testing.assert_allclose((xs[-2], ys[-2]), cie_family.SPECTRAL_LOCUS[-1])

    def test_white_point(self, sample):
        ax = cieplot(sample(Space.CIEXYZ))
        offsets = np.asarray(ax.collections[0].get_offsets())
        np.testing.assert_allclose(offsets, [[1 / 3, 1 / 3]])

    def test_locus_matches_wavelengths(self):
        assert len(cie_family.SPECTRAL_LOCUS) == len(cie_family.LOCUS_WAVELENGTHS)
        assert cie_family.LOCUS_WAVELENGTHS[0] == 380
        assert cie_family.LOCUS_WAVELENGTHS[-1] == 700

    def test_xyz_is_planar(self, sample):
        ax = cieplot(sample(Space.CIEXYZ))
        assert ax.name == "rectilinear"

    def test_lab_is_3d(self, sample):
        ax = cieplot(sample(Space.CIELAB))
        assert ax.name == "3d"
        assert ax.get_zlim() == (0, 100)

    def test_space_override(self):
        df = pd.DataFrame({"L": [40.0], "a": [5.0], "b": [-3.0]})
        ax = cieplot(df, space="CIELAB")
        assert ax.name == "3d"

    def test_rejects_non_cie(self, sample):
        with pytest.raises(ValueError, match="CIEXYZ or CIELAB"):
            cieplot(sample(Space.TRISPACE))

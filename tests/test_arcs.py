# tests/test_arcs.py
"""
TEST: Arc Paths
===============

An arc is a quadratic Bézier from source to target whose middle control
point is the chord midpoint lifted along +z by |Δx| + |Δy|/1.3.

We check:
1. Endpoints are exactly the node positions
2. Sample count is exactly the configured count
3. Control point follows the bulge heuristic
4. Degenerate input (source == target) produces no curve
"""

import math

import numpy as np
import pytest

from globe_graph.arcs import (
    ARC_SAMPLES,
    Arc,
    ArcPathBuilder,
    arc_bulge,
    arc_control_point,
    quadratic_bezier,
)
from globe_graph.graph import Graph
from globe_graph.model import GeoNode
from globe_graph.projection import GeoCoord, SphericalProjector

PROJ = SphericalProjector()
BERLIN = PROJ.project(GeoCoord(52, 13))
SANTIAGO = PROJ.project(GeoCoord(-33, -70))


def test_bulge_heuristic():
    assert arc_bulge((0, 0, 0), (10, 13, 99)) == pytest.approx(10 + 13 / 1.3)
    # symmetric in its arguments, ignores z
    assert arc_bulge((3, -4, 1), (-1, 2, 7)) == arc_bulge((-1, 2, 7), (3, -4, 1))


def test_control_point_is_lifted_midpoint():
    src = np.array([100.0, 200.0, 300.0])
    dst = np.array([-100.0, 50.0, 100.0])
    ctrl = arc_control_point(src, dst)

    expected_lift = 200.0 + 150.0 / 1.3
    np.testing.assert_allclose(ctrl, [0.0, 125.0, 200.0 + expected_lift])


def test_control_point_does_not_modify_inputs():
    src = np.array([1.0, 2.0, 3.0])
    dst = np.array([4.0, 5.0, 6.0])
    arc_control_point(src, dst)
    np.testing.assert_array_equal(src, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(dst, [4.0, 5.0, 6.0])


def test_quadratic_bezier_midpoint():
    """B(1/2) = (p0 + 2 p1 + p2) / 4"""
    p0, p1, p2 = np.array([0.0, 0, 0]), np.array([1.0, 2, 0]), np.array([2.0, 0, 0])
    pts = quadratic_bezier(p0, p1, p2, 3)

    np.testing.assert_allclose(pts[1], (p0 + 2 * p1 + p2) / 4)


def test_quadratic_bezier_needs_two_points():
    with pytest.raises(ValueError):
        quadratic_bezier((0, 0, 0), (1, 1, 1), (2, 2, 2), 1)


class TestArcPathBuilder:
    """Sampled arcs between projected cities."""

    def test_default_sample_count(self):
        arc = ArcPathBuilder().build(BERLIN, SANTIAGO)
        assert ARC_SAMPLES == 400
        assert len(arc) == 400
        assert arc.points.shape == (400, 3)

    @pytest.mark.parametrize("samples", [2, 17, 1000])
    def test_configured_sample_count(self, samples):
        arc = ArcPathBuilder(samples=samples).build(BERLIN, SANTIAGO)
        assert arc.points.shape == (samples, 3)

    def test_endpoints_are_exact(self):
        arc = ArcPathBuilder().build(BERLIN, SANTIAGO)

        np.testing.assert_array_equal(arc.start, BERLIN)
        np.testing.assert_array_equal(arc.end, SANTIAGO)

    def test_deterministic(self):
        a = ArcPathBuilder().build(BERLIN, SANTIAGO)
        b = ArcPathBuilder().build(BERLIN, SANTIAGO)
        np.testing.assert_array_equal(a.points, b.points)

    def test_arc_longer_than_chord(self):
        arc = ArcPathBuilder().build(BERLIN, SANTIAGO)
        chord = math.dist(BERLIN, SANTIAGO)
        assert arc.length > chord

    def test_degenerate_arc_rejected(self):
        with pytest.raises(ValueError):
            ArcPathBuilder().build(BERLIN, BERLIN)

    def test_too_few_samples(self):
        with pytest.raises(ValueError):
            ArcPathBuilder(samples=1)

    def test_custom_bulge(self):
        """The heuristic is swappable without touching sampling."""
        flat = ArcPathBuilder(bulge=lambda s, t: 0.0)
        arc = flat.build((0.0, 0.0, 0.0), (10.0, 0.0, 0.0))

        # zero bulge -> straight chord
        np.testing.assert_allclose(arc.points[:, 1:], 0.0)
        np.testing.assert_allclose(arc.control, [5.0, 0.0, 0.0])

    def test_nan_propagates(self):
        arc = ArcPathBuilder(samples=5).build((float('nan'), 0.0, 0.0), (1.0, 1.0, 1.0))
        assert np.isnan(arc.points[1]).any()

    def test_build_edge(self):
        g = Graph()
        a = GeoNode(0, "Berlin", (52, 13))
        b = GeoNode(1, "Santiago", (-33, -70))
        g.add_node(a)
        g.add_node(b)
        g.add_edge(a, b)

        arc = ArcPathBuilder().build_edge(g.edges()[0])

        assert isinstance(arc, Arc)
        assert arc.edge_id == 0
        np.testing.assert_array_equal(arc.start, a.position)
        np.testing.assert_array_equal(arc.end, b.position)

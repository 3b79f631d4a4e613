# tests/test_viz3d.py
"""
TEST: Plotly Scene Adapter
==========================

Smoke tests for the Plotly implementation of the SceneAdapter: trace
types, geometry of the generated meshes, camera orbit and HTML export.
"""

import math

import numpy as np
import plotly.graph_objects as go
import pytest

from globe_graph import DrawingConfig, RenderLoop, build_drawing
from globe_graph.viz import PlotlySceneAdapter, look_at_rotation, plot_sphere_graph, uv_sphere


def test_uv_sphere_geometry():
    vertices, faces = uv_sphere(2.0, center=(1.0, 2.0, 3.0), n_lon=8, n_lat=4)

    assert vertices.shape == (5 * 8, 3)
    assert faces.shape == (2 * 4 * 8, 3)
    assert faces.max() < len(vertices)

    radii = np.linalg.norm(vertices - np.array([1.0, 2.0, 3.0]), axis=1)
    np.testing.assert_allclose(radii, 2.0)


def test_look_at_rotation_identity_when_degenerate():
    np.testing.assert_array_equal(look_at_rotation((0, 0, 0), (0, 0, 0)), np.eye(3))


def test_look_at_rotation_is_orthonormal():
    R = look_at_rotation((0, 0, 0), (1.0, 2.0, -3.0))
    np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
    # local +z now points at the target
    np.testing.assert_allclose(R[:, 2], np.array([1.0, 2.0, -3.0]) / math.sqrt(14))


class TestPlotlySceneAdapter:

    def setup_method(self):
        self.config = DrawingConfig(arc_samples=20, show_info=True, selection=True)
        self.adapter = PlotlySceneAdapter(self.config)
        self.context = build_drawing(self.adapter, self.config)

    def test_trace_types(self):
        fig = self.context.scene
        kinds = [type(t).__name__ for t in fig.data]

        assert kinds[0] == 'Surface'
        assert kinds.count('Mesh3d') == 7
        assert kinds.count('Scatter3d') == 21

    def test_arc_traces_match_arcs(self):
        for edge_id, trace in self.context.edge_primitives.items():
            arc = self.context.arcs[edge_id]
            assert isinstance(trace, go.Scatter3d)
            assert trace.mode == 'lines'
            assert trace.line.color == 'red'
            np.testing.assert_allclose(trace.x, arc.points[:, 0])
            np.testing.assert_allclose(trace.z, arc.points[:, 2])

    def test_node_mesh_centered_on_node(self):
        node = self.context.graph.get_node(4)
        mesh = self.context.node_primitives[4]
        center = np.array([np.mean(mesh.x), np.mean(mesh.y), np.mean(mesh.z)])
        # poles are over-represented in a UV grid, so only roughly centred
        assert np.linalg.norm(center - np.array(node.position)) < self.config.node_radius

    def test_camera_outside_sphere(self):
        eye = self.context.camera['eye']
        assert eye['z'] == pytest.approx(2.0)
        assert self.context.camera['up'] == dict(x=0.0, y=1.0, z=0.0)

    def test_render_loop_updates_title(self):
        loop = RenderLoop(self.context)
        loop.start()
        self.adapter.select(2)
        self.adapter.run(frames=3)

        assert self.adapter.frames_rendered == 3
        assert self.context.scene.layout.title.text == "Nodes 7 - Edges 21 - Object 2"

    def test_plot_writes_html(self, tmp_path):
        outpath = tmp_path / "out" / "globe.html"
        fig = plot_sphere_graph(self.context, outpath=str(outpath), show=False)

        assert isinstance(fig, go.Figure)
        assert outpath.exists()
        assert outpath.stat().st_size > 0


def test_auto_rotate_orbits_camera():
    config = DrawingConfig(auto_rotate_deg=90.0)
    adapter = PlotlySceneAdapter(config)
    camera = adapter.create_camera()

    adapter.update_controls(camera)

    assert camera['eye']['x'] == pytest.approx(2.0)
    assert camera['eye']['z'] == pytest.approx(0.0, abs=1e-12)
    assert camera['eye']['y'] == 0.0


def test_no_rotation_by_default():
    adapter = PlotlySceneAdapter(DrawingConfig())
    camera = adapter.create_camera()
    adapter.update_controls(camera)
    assert camera['eye'] == dict(x=0.0, y=0.0, z=2.0)

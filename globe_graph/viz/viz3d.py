# globe_graph/viz/viz3d.py
"""
3D VISUALIZATION: Plotly Scene Adapter for Sphere Graphs
========================================================

PURPOSE:
--------
Implements the SceneAdapter interface with Plotly so a sphere graph can be
rotated/zoomed in a browser or notebook and exported as standalone HTML.

MAPPING:
--------
    scene            go.Figure
    camera           plotly scene-camera dict (eye / up / center)
    globe            go.Surface (latitude-shaded, no texture)
    node sphere      go.Mesh3d UV sphere
    arc polyline     go.Scatter3d in 'lines' mode
    info overlay     figure title
    frame loop       run(frames) calls the registered callbacks

Plotly figures are static between renders, so "controls" amount to an
optional automatic orbit of the camera around the sphere's up (+y) axis;
mouse rotation/zoom/pan is Plotly's own.
"""

import logging
import math
import os
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
import plotly.graph_objects as go

from ..config import CONFIG, DrawingConfig
from ..scene import FrameCallback, SelectionCallback, SelectionEvent

logger = logging.getLogger(__name__)


def uv_sphere(
    radius: float,
    center: Sequence[float] = (0.0, 0.0, 0.0),
    n_lon: int = 25,
    n_lat: int = 12,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Triangulated sphere with +y as the polar axis.

    Returns:
    --------
    vertices : np.ndarray
        Shape ((n_lat + 1) * n_lon, 3)
    faces : np.ndarray
        Shape (2 * n_lat * n_lon, 3), vertex indices per triangle
    """
    lon = np.linspace(0.0, 2 * np.pi, n_lon, endpoint=False)
    lat = np.linspace(0.0, np.pi, n_lat + 1)
    LAT, LON = np.meshgrid(lat, lon, indexing='ij')

    cx, cy, cz = (float(c) for c in center)
    vertices = np.column_stack([
        cx + radius * (np.sin(LAT) * np.cos(LON)).ravel(),
        cy + radius * np.cos(LAT).ravel(),
        cz + radius * (np.sin(LAT) * np.sin(LON)).ravel(),
    ])

    row, col = np.meshgrid(np.arange(n_lat), np.arange(n_lon), indexing='ij')
    a = row * n_lon + col
    b = row * n_lon + (col + 1) % n_lon
    c = (row + 1) * n_lon + col
    d = (row + 1) * n_lon + (col + 1) % n_lon
    faces = np.concatenate([
        np.column_stack([a.ravel(), c.ravel(), b.ravel()]),
        np.column_stack([b.ravel(), c.ravel(), d.ravel()]),
    ])
    return vertices, faces


def look_at_rotation(
    eye: Sequence[float],
    target: Sequence[float],
    up: Sequence[float] = (0.0, 1.0, 0.0),
) -> np.ndarray:
    """
    Rotation turning an object's local +z axis from `eye` towards `target`.

    Returns the identity when eye == target (no direction to face).
    """
    z = np.asarray(target, dtype=float) - np.asarray(eye, dtype=float)
    if np.linalg.norm(z) == 0.0:
        return np.eye(3)
    z /= np.linalg.norm(z)

    x = np.cross(np.asarray(up, dtype=float), z)
    if np.linalg.norm(x) == 0.0:
        # up parallel to z: nudge z so a basis exists
        z = z + np.array([1e-4, 0.0, 0.0])
        z /= np.linalg.norm(z)
        x = np.cross(np.asarray(up, dtype=float), z)
    x /= np.linalg.norm(x)
    y = np.cross(z, x)
    return np.column_stack([x, y, z])


class PlotlySceneAdapter:
    """
    SceneAdapter backed by a Plotly figure.

    Parameters:
    -----------
    config : DrawingConfig
        Globe/node tessellation, colors and camera settings

    Attributes:
    -----------
    frames_rendered : int
        Number of render_frame() calls so far
    """

    def __init__(self, config: DrawingConfig = CONFIG):
        self.config = config
        self.frames_rendered = 0
        self._frame_callbacks: List[FrameCallback] = []
        self._select_callbacks: List[SelectionCallback] = []

    # =========================================================================
    # SCENE / CAMERA
    # =========================================================================

    def create_scene(self) -> go.Figure:
        fig = go.Figure()
        fig.update_layout(
            title=dict(text="", font=dict(size=14, color='white')),
            scene=dict(
                xaxis=dict(visible=False),
                yaxis=dict(visible=False),
                zaxis=dict(visible=False),
                aspectmode='data',
                bgcolor='black',
            ),
            paper_bgcolor='black',
            showlegend=False,
            margin=dict(l=0, r=0, t=40, b=0),
        )
        return fig

    def create_camera(self) -> dict:
        # Plotly eye coordinates are relative to the scene size, not data units
        distance = self.config.camera_distance / self.config.sphere_radius
        return dict(
            eye=dict(x=0.0, y=0.0, z=distance),
            up=dict(x=0.0, y=1.0, z=0.0),
            center=dict(x=0.0, y=0.0, z=0.0),
            projection=dict(type='perspective'),
        )

    def update_controls(self, camera: dict) -> None:
        if not self.config.auto_rotate_deg:
            return
        angle = math.radians(self.config.auto_rotate_deg)
        ex, ez = camera['eye']['x'], camera['eye']['z']
        camera['eye']['x'] = ex * math.cos(angle) + ez * math.sin(angle)
        camera['eye']['z'] = -ex * math.sin(angle) + ez * math.cos(angle)

    def render_frame(self, scene: go.Figure, camera: dict) -> go.Figure:
        scene.update_layout(scene_camera=camera)
        self.frames_rendered += 1
        return scene

    def display_info(self, scene: go.Figure, text: str) -> None:
        scene.update_layout(title_text=text)

    # =========================================================================
    # PRIMITIVES
    # =========================================================================

    def add_to_scene(self, scene: go.Figure, primitive: Any) -> None:
        scene.add_trace(primitive)

    def create_sphere_mesh(
        self,
        radius: float,
        position: Sequence[float],
        color: Optional[str] = None,
    ):
        """
        Sphere at `position`.

        Without a color this is the globe itself (shaded Surface); with a
        color it is a node marker (Mesh3d).
        """
        if color is None:
            return self._globe_surface(radius, position)

        n_lon, n_lat = self.config.node_segments
        vertices, faces = uv_sphere(radius, position, n_lon=n_lon, n_lat=n_lat)
        px, py, pz = (float(c) for c in position)
        return go.Mesh3d(
            x=vertices[:, 0], y=vertices[:, 1], z=vertices[:, 2],
            i=faces[:, 0], j=faces[:, 1], k=faces[:, 2],
            color=color,
            flatshading=True,
            hovertext=f"({px:.0f}, {py:.0f}, {pz:.0f})",
            hoverinfo='text',
        )

    def _globe_surface(self, radius: float, center: Sequence[float]) -> go.Surface:
        n_lon, n_lat = self.config.globe_segments
        lon = np.linspace(0.0, 2 * np.pi, n_lon + 1)
        lat = np.linspace(0.0, np.pi, n_lat + 1)
        LAT, LON = np.meshgrid(lat, lon, indexing='ij')

        cx, cy, cz = (float(c) for c in center)
        y = cy + radius * np.cos(LAT)
        return go.Surface(
            x=cx + radius * np.sin(LAT) * np.cos(LON),
            y=y,
            z=cz + radius * np.sin(LAT) * np.sin(LON),
            surfacecolor=y,
            colorscale=self.config.globe_colorscale,
            showscale=False,
            hoverinfo='skip',
        )

    def create_polyline_from_points(self, points: Any, color: str = "red", width: float = 2) -> go.Scatter3d:
        pts = np.asarray(points, dtype=float)
        return go.Scatter3d(
            x=pts[:, 0], y=pts[:, 1], z=pts[:, 2],
            mode='lines',
            line=dict(color=color, width=width),
            hoverinfo='skip',
        )

    def look_at(self, primitive: go.Scatter3d, target: Sequence[float]) -> go.Scatter3d:
        """
        Turn a line trace to face `target`.

        Traces have no transform of their own; their local origin is the
        world origin, so facing the sphere center is the identity.
        """
        R = look_at_rotation((0.0, 0.0, 0.0), target)
        if np.array_equal(R, np.eye(3)):
            return primitive
        pts = np.column_stack([primitive.x, primitive.y, primitive.z]) @ R.T
        primitive.update(x=pts[:, 0], y=pts[:, 1], z=pts[:, 2])
        return primitive

    def face_camera(self, primitive: Any, camera: dict) -> None:
        # Node markers are spheres: facing the camera changes nothing visible
        return None

    # =========================================================================
    # EVENTS / LOOP
    # =========================================================================

    def on_frame(self, callback: FrameCallback) -> None:
        self._frame_callbacks.append(callback)

    def on_select(self, callback: SelectionCallback) -> None:
        self._select_callbacks.append(callback)

    def select(self, object_id: Optional[int]) -> None:
        """Emit a selection change (Plotly has no picking hook outside Dash)."""
        event = SelectionEvent(object_id)
        for callback in self._select_callbacks:
            callback(event)

    def run(self, frames: int = 1) -> None:
        """Drive `frames` ticks of every registered frame callback."""
        for _ in range(frames):
            for callback in list(self._frame_callbacks):
                callback()

    def write_html(self, scene: go.Figure, outpath: str) -> str:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        scene.write_html(outpath)
        logger.info("Sphere graph written to %s", outpath)
        return outpath


def plot_sphere_graph(
    context,
    outpath: Optional[str] = None,
    show: bool = True,
) -> go.Figure:
    """
    Render one frame of a drawing and optionally save/display it.

    Parameters:
    -----------
    context : DrawingContext
        Built with a PlotlySceneAdapter
    outpath : Optional[str]
        If provided, save as HTML file
    show : bool
        Whether to display the figure (default: True)

    Example:
    --------
    >>> context = build_drawing(PlotlySceneAdapter())
    >>> fig = plot_sphere_graph(context, outpath="artifacts/cities.html", show=False)
    """
    fig = context.adapter.render_frame(context.scene, context.camera)
    if context.config.show_info and context.overlay is not None:
        context.adapter.display_info(fig, context.overlay.text())

    if outpath:
        context.adapter.write_html(fig, outpath)
        print(f"3D visualization saved to: {outpath}")

    if show:
        fig.show()

    return fig

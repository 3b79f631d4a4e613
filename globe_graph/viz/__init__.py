# globe_graph/viz - Visualization Tools
"""
VIZ: Rendering for Sphere Graphs
================================

- viz3d: Plotly implementation of the SceneAdapter interface
"""

from .viz3d import PlotlySceneAdapter, plot_sphere_graph, uv_sphere, look_at_rotation

__all__ = ['PlotlySceneAdapter', 'plot_sphere_graph', 'uv_sphere', 'look_at_rotation']

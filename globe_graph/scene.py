# globe_graph/scene.py
"""
Interface of the rendering collaborator.

The graph, projector and arc builder never talk to a renderer directly.
Everything visual goes through a SceneAdapter, which owns the scene, the
camera, the controls and the frame loop. `viz.viz3d.PlotlySceneAdapter`
is the implementation shipped with the package; tests use a recording
fake.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence


@dataclass(frozen=True)
class SelectionEvent:
    """Emitted by an adapter when the picked object changes (None = nothing picked)."""
    object_id: Optional[int]


FrameCallback = Callable[[], None]
SelectionCallback = Callable[[SelectionEvent], None]


class SceneAdapter(Protocol):
    def create_scene(self) -> Any: ...

    def create_camera(self) -> Any: ...

    def add_to_scene(self, scene: Any, primitive: Any) -> None: ...

    def create_sphere_mesh(
        self, radius: float, position: Sequence[float], color: Optional[str] = None
    ) -> Any: ...

    def create_polyline_from_points(
        self, points: Any, color: str = "red", width: float = 2
    ) -> Any: ...

    def look_at(self, primitive: Any, target: Sequence[float]) -> Any: ...

    def face_camera(self, primitive: Any, camera: Any) -> None: ...

    def update_controls(self, camera: Any) -> None: ...

    def render_frame(self, scene: Any, camera: Any) -> Any: ...

    def display_info(self, scene: Any, text: str) -> None: ...

    def on_frame(self, callback: FrameCallback) -> None: ...

    def on_select(self, callback: SelectionCallback) -> None: ...

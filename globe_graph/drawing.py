# globe_graph/drawing.py
"""
SPHERE GRAPH DRAWING: Wiring the Graph to a Scene
=================================================

PURPOSE:
--------
Turn a list of cities into a drawn sphere graph:

    cities ──► Graph ──► SphericalProjector ──► ArcPathBuilder ──► SceneAdapter
              (topology)   (node positions)       (edge curves)      (pixels)

1. build_drawing() sets up the scene through the adapter, adds every city
   as a node (drawing it if the add succeeded), then pairs every earlier
   node with every later one and draws each accepted edge as an arc.
2. RenderLoop.tick() is what the host calls once per frame: update
   controls, turn node meshes towards the camera, render, refresh the
   info overlay.

All state lives in a DrawingContext owned by the caller; nothing here is
module-global.

USAGE:
------
    from globe_graph import build_drawing, RenderLoop
    from globe_graph.viz import PlotlySceneAdapter

    adapter = PlotlySceneAdapter()
    context = build_drawing(adapter)
    loop = RenderLoop(context)
    loop.start()
    adapter.run(frames=1)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

import numpy as np

from .arcs import Arc, ArcPathBuilder
from .cities import REFERENCE_CITIES, City
from .config import CONFIG, DrawingConfig
from .graph import Graph
from .model import Edge, GeoNode
from .overlay import InfoOverlay
from .projection import GeoCoord, SphericalProjector
from .scene import SceneAdapter

logger = logging.getLogger(__name__)

SPHERE_CENTER = (0.0, 0.0, 0.0)


def random_color(rng: np.random.Generator) -> str:
    """Random '#rrggbb' color."""
    return f"#{int(rng.integers(0, 0xFFFFFF + 1)):06x}"


def create_graph(
    cities: Iterable[City],
    projector: Optional[SphericalProjector] = None,
    limit: Optional[int] = None,
    on_node: Optional[Callable[[GeoNode], None]] = None,
    on_edge: Optional[Callable[[Edge], None]] = None,
) -> Graph:
    """
    Build the complete graph over `cities`.

    Node ids follow the city order. Every accepted node is then connected
    to every node accepted after it, so n cities give n(n-1)/2 edges.
    `on_node` / `on_edge` fire only for adds that succeeded.
    """
    graph = Graph(limit=limit)

    nodes = []
    for i, city in enumerate(cities):
        node = GeoNode(i, city.name, GeoCoord(city.lat, city.lng), projector)
        if graph.add_node(node):
            nodes.append(node)
            if on_node is not None:
                on_node(node)
        else:
            logger.info("Skipped city %s: %s", city.name, graph.last_rejection.value)

    for i, current in enumerate(nodes):
        for target in nodes[i + 1:]:
            if graph.add_edge(current, target) and on_edge is not None:
                on_edge(graph.edges()[-1])

    logger.info("Built %r", graph)
    return graph


@dataclass(frozen=True)
class DrawingContext:
    """
    Everything a frame needs, owned by whoever called build_drawing().

    The graph, projector and builder are fixed once built; the primitive
    maps hold whatever objects the adapter returned for each node/edge.
    """
    adapter: SceneAdapter
    config: DrawingConfig
    scene: Any
    camera: Any
    graph: Graph
    projector: SphericalProjector
    builder: ArcPathBuilder
    overlay: Optional[InfoOverlay] = None
    globe: Any = None
    node_primitives: Dict[int, Any] = field(default_factory=dict)
    edge_primitives: Dict[int, Any] = field(default_factory=dict)
    arcs: Dict[int, Arc] = field(default_factory=dict)

    def refresh_targets(self) -> Tuple[Tuple[GeoNode, ...], Tuple[Edge, ...]]:
        """Nodes and edges a frame may need to refresh."""
        return self.graph.nodes(), self.graph.edges()


def build_drawing(
    adapter: SceneAdapter,
    config: DrawingConfig = CONFIG,
    cities: Iterable[City] = REFERENCE_CITIES,
) -> DrawingContext:
    """
    Set up the scene and draw the graph of `cities` into it.

    Parameters:
    -----------
    adapter : SceneAdapter
        Rendering collaborator (e.g. PlotlySceneAdapter)
    config : DrawingConfig
        Drawing options (radius, sample count, node limit, overlay, ...)
    cities : Iterable[City]
        Places to draw; defaults to the seven reference cities

    Returns:
    --------
    DrawingContext
        Ready to hand to RenderLoop
    """
    scene = adapter.create_scene()
    camera = adapter.create_camera()

    globe = adapter.create_sphere_mesh(config.sphere_radius, SPHERE_CENTER)
    adapter.add_to_scene(scene, globe)

    overlay = InfoOverlay() if (config.show_info or config.selection) else None
    if config.selection:
        adapter.on_select(overlay.on_selection)

    projector = SphericalProjector(radius=config.sphere_radius, validate=config.validate_coordinates)
    builder = ArcPathBuilder(samples=config.arc_samples)
    rng = np.random.default_rng(config.color_seed)

    node_primitives: Dict[int, Any] = {}
    edge_primitives: Dict[int, Any] = {}
    arcs: Dict[int, Arc] = {}

    def draw_node(node: GeoNode) -> None:
        mesh = adapter.create_sphere_mesh(config.node_radius, node.position, color=random_color(rng))
        adapter.add_to_scene(scene, mesh)
        node_primitives[node.id] = mesh

    def draw_edge(edge: Edge) -> None:
        try:
            arc = builder.build_edge(edge)
        except ValueError as e:
            # Distinct cities projected to the same point (shared coordinate, pole)
            logger.warning("No arc for edge %s (%s - %s): %s", edge.id, edge.source.label, edge.target.label, e)
            return
        line = adapter.create_polyline_from_points(arc.points, color=config.arc_color, width=config.arc_width)
        line = adapter.look_at(line, SPHERE_CENTER)
        adapter.add_to_scene(scene, line)
        edge_primitives[edge.id] = line
        arcs[edge.id] = arc

    graph = create_graph(cities, projector, config.limit, on_node=draw_node, on_edge=draw_edge)

    if config.show_info:
        overlay.set("nodes", f"Nodes {graph.node_count}")
        overlay.set("edges", f"Edges {graph.edge_count}")

    return DrawingContext(
        adapter=adapter,
        config=config,
        scene=scene,
        camera=camera,
        graph=graph,
        projector=projector,
        builder=builder,
        overlay=overlay,
        globe=globe,
        node_primitives=node_primitives,
        edge_primitives=edge_primitives,
        arcs=arcs,
    )


class RenderLoop:
    """
    Per-frame driver for a DrawingContext.

    start() registers tick() with the adapter's frame callback; stop() makes
    every later tick a no-op and may be called any number of times.
    """

    def __init__(self, context: DrawingContext):
        self.context = context
        self.frames = 0
        self._running = False
        self._registered = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if not self._registered:
            self.context.adapter.on_frame(self.tick)
            self._registered = True
        self._running = True

    def stop(self) -> None:
        if self._running:
            logger.info("Render loop stopped after %d frames", self.frames)
        self._running = False

    def tick(self) -> Any:
        if not self._running:
            return None

        ctx = self.context
        adapter = ctx.adapter

        adapter.update_controls(ctx.camera)

        nodes, _ = ctx.refresh_targets()
        for node in nodes:
            primitive = ctx.node_primitives.get(node.id)
            if primitive is not None:
                adapter.face_camera(primitive, ctx.camera)

        result = adapter.render_frame(ctx.scene, ctx.camera)

        if ctx.config.show_info and ctx.overlay is not None:
            adapter.display_info(ctx.scene, ctx.overlay.text())

        self.frames += 1
        return result

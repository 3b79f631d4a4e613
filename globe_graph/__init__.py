# globe_graph - Geographic Graphs on a Sphere
"""
GLOBE_GRAPH: Cities and Arcs on a 3D Globe
==========================================

This package provides:
- A simple undirected graph of named places (with an optional node limit)
- Projection of latitude/longitude onto a sphere
- Curved Bézier arcs between projected places
- A render loop that draws all of it through a pluggable scene adapter

ARCHITECTURE:
-------------
    projection.py   GeoCoord → Point3D on a sphere of radius R
    model.py        GeoNode, Edge (frozen records)
    graph.py        Graph container, RejectReason
    arcs.py         Arc sampling (ArcPathBuilder)
    scene.py        SceneAdapter interface, SelectionEvent
    overlay.py      Info overlay text
    drawing.py      build_drawing(), DrawingContext, RenderLoop
    cities.py       Reference city list
    config.py       DrawingConfig defaults
    viz/            Plotly scene adapter
"""

from .projection import GeoCoord, Point3D, SphericalProjector, ValidationError
from .model import GeoNode, Edge
from .graph import Graph, RejectReason
from .arcs import Arc, ArcPathBuilder, ARC_SAMPLES, arc_bulge
from .cities import City, REFERENCE_CITIES
from .config import CONFIG, DrawingConfig
from .drawing import DrawingContext, RenderLoop, build_drawing, create_graph

__version__ = "0.1.0"

__all__ = [
    'GeoCoord', 'Point3D', 'SphericalProjector', 'ValidationError',
    'GeoNode', 'Edge', 'Graph', 'RejectReason',
    'Arc', 'ArcPathBuilder', 'ARC_SAMPLES', 'arc_bulge',
    'City', 'REFERENCE_CITIES', 'CONFIG', 'DrawingConfig',
    'DrawingContext', 'RenderLoop', 'build_drawing', 'create_graph',
]

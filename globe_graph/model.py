# globe_graph/model.py
"""
GRAPH MODEL DEFINITIONS: GeoNode and Edge
=========================================

PURPOSE:
--------
This module defines the basic records of a sphere graph:
- GeoNode: a named place with a geographic coordinate and its 3D position
- Edge: an undirected connection between two distinct nodes

The Graph (graph.py) owns these records; everything else only holds
references to them.

WHY FROZEN DATACLASSES?
-----------------------
Nodes are placed once and never move (there is no iterative layout in
this drawing), and edges never change after they are added. Freezing
both means a renderer can cache positions without worrying about them
drifting underneath it.
"""

from dataclasses import InitVar, dataclass, field
from typing import FrozenSet, Optional, Tuple

from .projection import GeoCoord, Point3D, SphericalProjector

_DEFAULT_PROJECTOR = SphericalProjector()


@dataclass(frozen=True)
class GeoNode:
    """
    A city (or any named place) in the graph.

    Parameters:
    -----------
    id : int
        Unique identifier within a Graph

    label : str
        Display name, e.g. "Berlin"

    geo : GeoCoord
        Input coordinate (x ≈ latitude, y ≈ longitude), in degrees

    projector : SphericalProjector, optional (init only)
        Projector used to derive `position`. Defaults to the reference
        R=5000 sphere.

    Attributes:
    -----------
    position : Point3D
        Point on the sphere, derived from `geo` at construction time.
        It cannot be passed in directly.

    Examples:
    ---------
    >>> berlin = GeoNode(4, "Berlin", GeoCoord(52, 13))
    >>> round(sum(c * c for c in berlin.position) ** 0.5)
    5000
    """
    id: int
    label: str
    geo: GeoCoord
    projector: InitVar[Optional[SphericalProjector]] = None
    position: Point3D = field(init=False, compare=False)

    def __post_init__(self, projector: Optional[SphericalProjector]):
        geo = GeoCoord(*self.geo)
        object.__setattr__(self, 'geo', geo)
        object.__setattr__(self, 'position', (projector or _DEFAULT_PROJECTOR).project(geo))


@dataclass(frozen=True)
class Edge:
    """
    An undirected connection between two nodes.

    The Graph assigns `id` in insertion order and guarantees
    source.id != target.id and that no other edge shares the same pair.
    `source`/`target` keep the order the edge was added in, but the
    edge itself is unordered: (a, b) and (b, a) are the same connection.
    """
    id: int
    source: GeoNode
    target: GeoNode

    @property
    def key(self) -> FrozenSet[int]:
        """Unordered identity of the connection."""
        return frozenset((self.source.id, self.target.id))

    @property
    def endpoints(self) -> Tuple[Point3D, Point3D]:
        return self.source.position, self.target.position

# globe_graph/graph.py
"""
GRAPH: Simple Undirected Graph with a Node Limit
================================================

The Graph owns all GeoNode and Edge records of a drawing. It is built once
at startup and treated as read-only afterwards.

RULES:
------
- Node ids are unique.
- Edges are simple: no self-loops, at most one edge per unordered pair.
- An optional `limit` caps the number of nodes.

Failed adds are EXPECTED (e.g. pairing every city with every other city
will try some pairs twice), so they are reported with a False return and
a RejectReason rather than an exception:

    if graph.add_node(node):
        draw_node(node)
    else:
        print(graph.last_rejection)   # RejectReason.DUPLICATE_NODE, ...
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple, FrozenSet

from .model import Edge, GeoNode

logger = logging.getLogger(__name__)


class RejectReason(Enum):
    """Why an add_node / add_edge call was refused."""
    DUPLICATE_NODE = "duplicate node"
    NODE_LIMIT_EXCEEDED = "node limit exceeded"
    SELF_LOOP = "self-loop"
    DUPLICATE_EDGE = "duplicate edge"
    UNKNOWN_NODE = "unknown node"

    @property
    def is_invalid_edge(self) -> bool:
        return self in (RejectReason.SELF_LOOP, RejectReason.DUPLICATE_EDGE, RejectReason.UNKNOWN_NODE)


class Graph:
    """
    Container for the nodes and edges of a sphere graph.

    Parameters:
    -----------
    limit : Optional[int]
        Maximum number of nodes. None means unlimited.

    Examples:
    ---------
    >>> g = Graph(limit=2)
    >>> a = GeoNode(0, "A", (0, 0)); b = GeoNode(1, "B", (10, 10))
    >>> g.add_node(a), g.add_node(b), g.add_node(GeoNode(2, "C", (5, 5)))
    (True, True, False)
    >>> g.last_rejection
    <RejectReason.NODE_LIMIT_EXCEEDED: 'node limit exceeded'>
    >>> g.add_edge(a, b), g.add_edge(b, a)
    (True, False)
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0 or None, got {limit}")
        self.limit = limit
        self.last_rejection: Optional[RejectReason] = None

        self._nodes: Dict[int, GeoNode] = {}
        self._edges: List[Edge] = []
        self._edge_keys: Set[FrozenSet[int]] = set()
        self._adjacency: Dict[int, List[int]] = {}

    # ------------------------------------------------------------------
    # Checks (no mutation)
    # ------------------------------------------------------------------

    def reached_limit(self) -> bool:
        """True once the node count has hit the configured limit."""
        return self.limit is not None and len(self._nodes) >= self.limit

    def check_node(self, node: GeoNode) -> Optional[RejectReason]:
        """Reason add_node(node) would fail, or None if it would succeed."""
        if node.id in self._nodes:
            return RejectReason.DUPLICATE_NODE
        if self.reached_limit():
            return RejectReason.NODE_LIMIT_EXCEEDED
        return None

    def check_edge(self, a: GeoNode, b: GeoNode) -> Optional[RejectReason]:
        """Reason add_edge(a, b) would fail, or None if it would succeed."""
        if a.id == b.id:
            return RejectReason.SELF_LOOP
        if self._nodes.get(a.id) is not a or self._nodes.get(b.id) is not b:
            return RejectReason.UNKNOWN_NODE
        if frozenset((a.id, b.id)) in self._edge_keys:
            return RejectReason.DUPLICATE_EDGE
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(self, node: GeoNode) -> bool:
        """Register a node. Returns False (state unchanged) on duplicate id or full graph."""
        reason = self.check_node(node)
        self.last_rejection = reason
        if reason is not None:
            logger.debug("Rejected node %s (%s): %s", node.id, node.label, reason.value)
            return False

        self._nodes[node.id] = node
        self._adjacency[node.id] = []
        return True

    def add_edge(self, a: GeoNode, b: GeoNode) -> bool:
        """Connect two registered nodes (the same objects add_node() accepted). Returns False (state unchanged) otherwise."""
        reason = self.check_edge(a, b)
        self.last_rejection = reason
        if reason is not None:
            logger.debug("Rejected edge %s-%s: %s", a.id, b.id, reason.value)
            return False

        self._edges.append(Edge(id=len(self._edges), source=a, target=b))
        self._edge_keys.add(frozenset((a.id, b.id)))
        self._adjacency[a.id].append(b.id)
        self._adjacency[b.id].append(a.id)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def nodes(self) -> Tuple[GeoNode, ...]:
        """All nodes, in insertion order."""
        return tuple(self._nodes.values())

    def edges(self) -> Tuple[Edge, ...]:
        """All edges, in insertion order."""
        return tuple(self._edges)

    def get_node(self, node_id: int) -> Optional[GeoNode]:
        return self._nodes.get(node_id)

    def has_edge(self, a: GeoNode, b: GeoNode) -> bool:
        return frozenset((a.id, b.id)) in self._edge_keys

    def neighbors(self, node_id: int) -> Tuple[GeoNode, ...]:
        """Nodes connected to `node_id`, in the order the edges were added."""
        return tuple(self._nodes[i] for i in self._adjacency.get(node_id, ()))

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count}, limit={self.limit})"

# globe_graph/arcs.py
"""
ARC PATHS: Curved Edges Between Points on the Sphere
====================================================

PURPOSE:
--------
A straight line between two cities would cut through the globe. Instead
every edge is drawn as a quadratic Bézier curve whose middle control point
is lifted off the midpoint of the chord:

    M        = (source + target) / 2
    bulge    = |Δx| + |Δy| / 1.3
    control  = M + (0, 0, bulge)

    B(t) = (1-t)² · source + 2(1-t)t · control + t² · target,   t ∈ [0, 1]

The curve is sampled at a fixed number of points (400 by default) to give
a polyline the renderer can draw directly.

LIMITATIONS:
------------
- The bulge is a visual heuristic, not a great-circle computation. It is
  kept in its own function (`arc_bulge`) so it can be replaced without
  touching sampling or rendering. The Δy / 1.3 asymmetry is kept for
  visual parity with the reference drawing.
- The lift is along +z only, so it is not radial for every edge.
- NaN coordinates are not detected here; they propagate into the samples.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

import numpy as np

from .model import Edge

logger = logging.getLogger(__name__)

# Points per arc in the reference drawing
ARC_SAMPLES = 400

BulgeFn = Callable[[np.ndarray, np.ndarray], float]


def arc_bulge(source: Sequence[float], target: Sequence[float]) -> float:
    """Outward offset for the control point: |Δx| + |Δy| / 1.3."""
    dx = abs(source[0] - target[0])
    dy = abs(source[1] - target[1])
    return dx + dy / 1.3


def arc_control_point(
    source: Sequence[float],
    target: Sequence[float],
    bulge: BulgeFn = arc_bulge,
) -> np.ndarray:
    """
    Middle control point of the arc: chord midpoint pushed along +z.

    Returns:
    --------
    np.ndarray
        Shape (3,)
    """
    p0 = np.asarray(source, dtype=float)
    p2 = np.asarray(target, dtype=float)
    middle = (p0 + p2) / 2
    middle[2] += bulge(p0, p2)
    return middle


def quadratic_bezier(
    p0: Sequence[float],
    p1: Sequence[float],
    p2: Sequence[float],
    n_points: int,
) -> np.ndarray:
    """
    Sample a quadratic Bézier curve at `n_points` evenly spaced t values.

    The first row is exactly p0 and the last row is exactly p2.

    Returns:
    --------
    np.ndarray
        Shape (n_points, 3)
    """
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")

    p0 = np.asarray(p0, dtype=float)
    p1 = np.asarray(p1, dtype=float)
    p2 = np.asarray(p2, dtype=float)

    t = np.linspace(0.0, 1.0, n_points)[:, None]
    s = 1.0 - t
    return s * s * p0 + 2.0 * s * t * p1 + t * t * p2


@dataclass(eq=False)
class Arc:
    """
    A sampled curve between two projected nodes.

    Attributes:
    -----------
    points : np.ndarray
        Polyline samples, shape (n, 3). points[0] is the source position,
        points[-1] the target position.
    control : np.ndarray
        Bézier middle control point, shape (3,)
    edge_id : Optional[int]
        Edge this arc was built for, if any
    """
    points: np.ndarray
    control: np.ndarray
    edge_id: Optional[int] = None

    @property
    def start(self) -> np.ndarray:
        return self.points[0]

    @property
    def end(self) -> np.ndarray:
        return self.points[-1]

    @property
    def length(self) -> float:
        """Length of the sampled polyline (scene units)."""
        return float(np.linalg.norm(np.diff(self.points, axis=0), axis=1).sum())

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class ArcPathBuilder:
    """
    Builds Arc polylines for edges.

    Parameters:
    -----------
    samples : int
        Number of points per arc (>= 2). Reference: 400.
    bulge : callable
        (source, target) -> float offset for the control point.
        Defaults to `arc_bulge`.

    Examples:
    ---------
    >>> builder = ArcPathBuilder()
    >>> arc = builder.build((5000.0, 0.0, 0.0), (0.0, 5000.0, 0.0))
    >>> len(arc)
    400
    """
    samples: int = ARC_SAMPLES
    bulge: BulgeFn = field(default=arc_bulge)

    def __post_init__(self):
        if self.samples < 2:
            raise ValueError(f"samples must be >= 2, got {self.samples}")

    def control_point(self, source: Sequence[float], target: Sequence[float]) -> np.ndarray:
        return arc_control_point(source, target, self.bulge)

    def build(
        self,
        source: Sequence[float],
        target: Sequence[float],
        edge_id: Optional[int] = None,
    ) -> Arc:
        """
        Sample the arc from `source` to `target`.

        Raises:
        -------
        ValueError
            If source and target coincide (no curve to draw)
        """
        p0 = np.asarray(source, dtype=float)
        p2 = np.asarray(target, dtype=float)
        if np.array_equal(p0, p2):
            raise ValueError(f"Arc endpoints coincide at {tuple(p0)}; nothing to draw")

        control = self.control_point(p0, p2)
        points = quadratic_bezier(p0, control, p2, self.samples)
        return Arc(points=points, control=control, edge_id=edge_id)

    def build_edge(self, edge: Edge) -> Arc:
        """Arc between an edge's two projected nodes."""
        arc = self.build(edge.source.position, edge.target.position, edge_id=edge.id)
        logger.debug(
            "Arc %s: %s -> %s, length=%.1f",
            edge.id, edge.source.label, edge.target.label, arc.length,
        )
        return arc

# globe_graph/config.py
"""
Drawing configuration and defaults.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .arcs import ARC_SAMPLES
from .projection import DEFAULT_RADIUS


@dataclass
class DrawingConfig:
    """Options for a sphere graph drawing."""

    # Globe
    sphere_radius: float = DEFAULT_RADIUS
    globe_segments: Tuple[int, int] = (40, 30)  # (longitude, latitude) divisions
    globe_colorscale: str = "Blues"

    # Nodes
    node_radius: float = 50.0
    node_segments: Tuple[int, int] = (25, 12)
    color_seed: int = 0  # seeds the random node colors

    # Edges
    arc_samples: int = ARC_SAMPLES
    arc_color: str = "red"
    arc_width: float = 2

    # Graph
    limit: Optional[int] = None  # max number of nodes
    validate_coordinates: bool = False

    # Camera
    camera_distance: float = 10000.0
    auto_rotate_deg: float = 0.0  # camera orbit per controls update

    # Overlay / picking
    show_info: bool = False
    selection: bool = False

    def __post_init__(self):
        if self.sphere_radius <= 0:
            raise ValueError(f"sphere_radius must be positive, got {self.sphere_radius}")
        if self.node_radius <= 0:
            raise ValueError(f"node_radius must be positive, got {self.node_radius}")
        if self.arc_samples < 2:
            raise ValueError(f"arc_samples must be >= 2, got {self.arc_samples}")
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be >= 0 or None, got {self.limit}")
        if self.camera_distance <= self.sphere_radius:
            raise ValueError(
                f"camera_distance ({self.camera_distance}) must be outside the sphere "
                f"(radius {self.sphere_radius})"
            )
        if min(self.globe_segments) < 3 or min(self.node_segments) < 3:
            raise ValueError("globe_segments and node_segments need at least 3 divisions each")


# Global config instance
CONFIG = DrawingConfig()

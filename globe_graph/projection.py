# globe_graph/projection.py
"""
SPHERICAL PROJECTION: Geographic Coordinates → Points on a Sphere
=================================================================

PURPOSE:
--------
Place every city of the graph on the surface of a sphere of fixed radius.
A node is described by a 2D geographic-style coordinate:

    x ≈ latitude   (degrees, -90 .. 90)
    y ≈ longitude  (degrees, -180 .. 180)

and we need a 3D Cartesian point (x, y, z) to hand to the renderer.

THE FORMULA:
------------
    phi   = (90 - lat) * π / 180        colatitude, measured from the +y pole
    theta = (180 - lng) * π / 180       longitude offset

    x = R * sin(phi) * cos(theta)
    y = R * cos(phi)
    z = R * sin(phi) * sin(theta)

Note the sphere's "up" axis is +y (renderer convention), not +z.
Downstream arc math depends on this exact layout, so it must not change.

DEGENERACIES:
-------------
- (0, 0) lands on the equator at (-R, 0, 0) (up to rounding).
- lat = 90 collapses to (0, R, 0) for every longitude. That is how
  spherical coordinates behave at a pole; it is not a bug.
- Values outside the geographic range still give a point (trig wraps),
  they just stop meaning "that place on Earth".
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple

import numpy as np

logger = logging.getLogger(__name__)

# Radius used by the reference drawing (scene units)
DEFAULT_RADIUS = 5000.0


class ValidationError(ValueError):
    """Raised when a coordinate cannot be placed on the sphere (NaN/Inf)."""
    pass


class GeoCoord(NamedTuple):
    """Geographic-style input coordinate: x ≈ latitude, y ≈ longitude (degrees)."""
    x: float
    y: float


class Point3D(NamedTuple):
    """Cartesian point in scene space."""
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class SphericalProjector:
    """
    Projects geographic coordinates onto a sphere of fixed radius.

    Parameters:
    -----------
    radius : float
        Sphere radius in scene units (reference drawing: 5000)

    validate : bool
        If True, reject non-finite coordinates with ValidationError.
        If False (default), NaN/Inf simply propagate into the result.

    Examples:
    ---------
    >>> proj = SphericalProjector()
    >>> proj.project(GeoCoord(90.0, 180.0))
    Point3D(x=0.0, y=5000.0, z=0.0)
    """
    radius: float = DEFAULT_RADIUS
    validate: bool = False

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"radius must be positive, got {self.radius}")

    def _check(self, lat: float, lng: float) -> None:
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise ValidationError(f"Non-finite coordinate ({lat}, {lng}) cannot be projected")

    def project(self, geo: GeoCoord) -> Point3D:
        """
        Project a single coordinate onto the sphere.

        Pure: the same input always yields a bit-identical Point3D.

        Raises:
        -------
        ValidationError
            Only when validate=True and the coordinate is NaN/Inf
        """
        lat, lng = float(geo[0]), float(geo[1])
        if self.validate:
            self._check(lat, lng)

        phi = (90 - lat) * math.pi / 180
        theta = (180 - lng) * math.pi / 180

        return Point3D(
            x=self.radius * math.sin(phi) * math.cos(theta),
            y=self.radius * math.cos(phi),
            z=self.radius * math.sin(phi) * math.sin(theta),
        )

    def project_many(self, coords: Iterable[GeoCoord]) -> np.ndarray:
        """
        Vectorized projection.

        Returns:
        --------
        np.ndarray
            Array of shape (n, 3), one row per input coordinate
        """
        geo = np.asarray(list(coords), dtype=float).reshape(-1, 2)
        if self.validate and not np.all(np.isfinite(geo)):
            bad = int(np.argmax(~np.isfinite(geo).all(axis=1)))
            raise ValidationError(f"Non-finite coordinate at index {bad}: {tuple(geo[bad])}")

        phi = (90 - geo[:, 0]) * np.pi / 180
        theta = (180 - geo[:, 1]) * np.pi / 180

        out = np.empty((len(geo), 3))
        out[:, 0] = self.radius * np.sin(phi) * np.cos(theta)
        out[:, 1] = self.radius * np.cos(phi)
        out[:, 2] = self.radius * np.sin(phi) * np.sin(theta)
        logger.debug("Projected %d coordinates onto sphere R=%s", len(out), self.radius)
        return out

"""
Hex <-> pixel transforms.

A Layout is the only thing that knows how big a hex is on screen and where
Hex(0, 0) sits. Every method is a pure function of the layout and its
arguments.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, NamedTuple, Set, Tuple

from hexgeom.hex_math import Hex, cube_round, hex_linedraw

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    """A position in continuous pixel space."""
    x: float
    y: float


@dataclass(frozen=True)
class Orientation:
    """
    Forward (axial -> pixel) and inverse (pixel -> axial) 2x2 matrices,
    stored row-major, plus the unit-circle offsets of the six corners.
    """
    name: str
    forward: Tuple[float, float, float, float]
    inverse: Tuple[float, float, float, float]
    start_angle: float
    corner_cos: Tuple[float, ...]
    corner_sin: Tuple[float, ...]


def _make_orientation(name: str, forward, inverse, start_angle: float) -> Orientation:
    # Corner k sits at (start_angle + k) sixths of a full turn.
    angles = [2.0 * math.pi * (start_angle + k) / 6 for k in range(6)]
    return Orientation(
        name=name,
        forward=tuple(forward),
        inverse=tuple(inverse),
        start_angle=start_angle,
        corner_cos=tuple(math.cos(a) for a in angles),
        corner_sin=tuple(math.sin(a) for a in angles),
    )

# --- Constants ---

ORIENTATION_POINTY = _make_orientation(
    "pointy",
    forward=(math.sqrt(3.0), math.sqrt(3.0) / 2.0, 0.0, 3.0 / 2.0),
    inverse=(math.sqrt(3.0) / 3.0, -1.0 / 3.0, 0.0, 2.0 / 3.0),
    start_angle=0.5,
)

ORIENTATION_FLAT = _make_orientation(
    "flat",
    forward=(3.0 / 2.0, 0.0, math.sqrt(3.0) / 2.0, math.sqrt(3.0)),
    inverse=(2.0 / 3.0, 0.0, -1.0 / 3.0, math.sqrt(3.0) / 3.0),
    start_angle=0.0,
)


@dataclass(frozen=True)
class Layout:
    """
    Pixel size (X and Y scale independently), pixel origin of Hex(0, 0),
    and the orientation of the grid.
    """
    size: Point
    origin: Point
    orientation: Orientation

    def __post_init__(self):
        # Accept plain (x, y) tuples.
        object.__setattr__(self, "size", Point(*self.size))
        object.__setattr__(self, "origin", Point(*self.origin))
        if self.size.x <= 0 or self.size.y <= 0:
            raise ValueError(f"Layout size must be positive on both axes, got {tuple(self.size)}")

    @property
    def radius(self) -> Point:
        """Screen size of a single hex (center to corner, per axis)."""
        return self.size

    def center_for(self, h: Hex) -> Point:
        """Pixel position of the center of the hex."""
        f = self.orientation.forward
        q, r = float(h.q), float(h.r)
        x = (f[0] * q + f[1] * r) * self.size.x
        y = (f[2] * q + f[3] * r) * self.size.y
        return Point(x + self.origin.x, y + self.origin.y)

    def _pixel_center(self, h: Hex) -> Point:
        """Center snapped to whole pixels (truncated before the origin is applied)."""
        f = self.orientation.forward
        q, r = float(h.q), float(h.r)
        x = (f[0] * q + f[1] * r) * self.size.x
        y = (f[2] * q + f[3] * r) * self.size.y
        return Point(math.trunc(x) + self.origin.x, math.trunc(y) + self.origin.y)

    def top_left_for(self, h: Hex) -> Point:
        """Top left corner of the box bounding the hex."""
        center = self.center_for(h)
        return Point(center.x - self.size.x, center.y - self.size.y)

    def hex_for(self, p: Point) -> Hex:
        """The hex that contains a pixel position."""
        b = self.orientation.inverse
        x = (p[0] - self.origin.x) / self.size.x
        y = (p[1] - self.origin.y) / self.size.y
        q = b[0] * x + b[1] * y
        r = b[2] * x + b[3] * y
        return cube_round(q, r, -q - r)

    def vertices(self, h: Hex) -> List[Point]:
        """
        The six corners of the hex followed by its center.
        Corner k of a hex lands on the same pixel as the matching corner of
        the neighbor sharing that edge.
        """
        m = self.orientation
        center = self.center_for(h)
        result = [
            Point(center.x + self.size.x * m.corner_cos[k],
                  center.y + self.size.y * m.corner_sin[k])
            for k in range(6)
        ]
        result.append(center)
        return result

    def ring_for(self, center: Hex, pixel_radius: int) -> Set[Hex]:
        """
        Hexes lying on a screen circle of `pixel_radius` around the center.
        Walks the midpoint circle algorithm one octant at a time and maps
        each of the eight mirrored pixels back to a hex.
        """
        result: Set[Hex] = set()
        if pixel_radius < self.size.x and pixel_radius < self.size.y:
            logger.debug(f"Pixel radius {pixel_radius} is smaller than a hex, ring is {center} only")
            result.add(center)
            return result

        # The circle walk steps whole pixels, so anchor it on a whole pixel too.
        cx, cy = self._pixel_center(center)
        decision = 1 - pixel_radius
        px, py = pixel_radius, 0
        while px > py:
            if decision <= 0:
                decision += 2 * py + 1
            else:
                px -= 1
                decision += 2 * py - 2 * px + 1

            if px < py:
                break

            for ox, oy in ((px, py), (-px, py), (px, -py), (-px, -py),
                           (py, px), (-py, px), (py, -px), (-py, -px)):
                result.add(self.hex_for(Point(cx + ox, cy + oy)))
            py += 1
        return result

    def area_for(self, center: Hex, pixel_radius: int) -> Set[Hex]:
        """All hexes inside a screen circle, filled by spokes from the ring to the center."""
        result: Set[Hex] = set()
        for edge in self.ring_for(center, pixel_radius):
            result.add(edge)
            result.update(hex_linedraw(edge, center))
        return result


def make_layout(hex_size: float, origin: Point, orientation: Orientation) -> Layout:
    """Uniformly scaled layout, the common case for rendering on screen."""
    return Layout(size=Point(hex_size, hex_size), origin=Point(*origin), orientation=orientation)

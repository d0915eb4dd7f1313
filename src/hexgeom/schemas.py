from enum import Enum
from typing import Dict, Iterable, List

from pydantic import BaseModel, field_validator

from hexgeom.hex_math import Hex
from hexgeom.layout import (
    ORIENTATION_FLAT, ORIENTATION_POINTY, Layout, Orientation, Point
)

# --- Enums (Strict Vocabulary) ---

class OrientationName(str, Enum):
    POINTY = "pointy"
    FLAT = "flat"

ORIENTATIONS: Dict[OrientationName, Orientation] = {
    OrientationName.POINTY: ORIENTATION_POINTY,
    OrientationName.FLAT: ORIENTATION_FLAT,
}

# --- Basic Primitives ---

class HexCoord(BaseModel):
    """
    Data Transfer Object for Hex coordinates.
    Maps to {"q": int, "r": int} JSON.
    """
    q: int
    r: int

    def __hash__(self):
        return hash((self.q, self.r))

    def __eq__(self, other):
        if not isinstance(other, HexCoord):
            return NotImplemented
        return self.q == other.q and self.r == other.r

    @classmethod
    def from_hex(cls, h: Hex) -> "HexCoord":
        return cls(q=h.q, r=h.r)

    def to_hex(self) -> Hex:
        return Hex(self.q, self.r)


def hexes_to_coords(hexes: Iterable[Hex]) -> List[HexCoord]:
    """Query results are unordered sets; sort so the JSON is stable."""
    return [HexCoord.from_hex(h) for h in sorted(hexes, key=lambda h: (h.q, h.r))]

# --- Layout Configuration ---

class LayoutConfig(BaseModel):
    """
    Host-facing layout settings, e.g. loaded from a JSON config file.
    X and Y sizes are independent so a grid can be stretched.
    """
    size_x: float
    size_y: float
    origin_x: float = 0.0
    origin_y: float = 0.0
    orientation: OrientationName = OrientationName.POINTY

    @field_validator('size_x', 'size_y')
    def check_size(cls, v):
        if v <= 0:
            raise ValueError('Hex size must be positive')
        return v

    @classmethod
    def from_layout(cls, layout: Layout) -> "LayoutConfig":
        names = [name for name, o in ORIENTATIONS.items() if o is layout.orientation]
        if not names:
            raise ValueError(f"Orientation {layout.orientation.name!r} is not one of the presets")
        return cls(
            size_x=layout.size.x,
            size_y=layout.size.y,
            origin_x=layout.origin.x,
            origin_y=layout.origin.y,
            orientation=names[0],
        )

    def to_layout(self) -> Layout:
        return Layout(
            size=Point(self.size_x, self.size_y),
            origin=Point(self.origin_x, self.origin_y),
            orientation=ORIENTATIONS[self.orientation],
        )

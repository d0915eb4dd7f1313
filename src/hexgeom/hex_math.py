"""
Hexagonal Grid Math Library
System: Axial (q, r) & Cube (q, r, s)
Constraint: q + r + s == 0 for every hex and every delta.
"""

import logging
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Set, Tuple

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """The six edges of a hex. UNDEFINED is a table placeholder only."""
    POS_Q = 0
    NEG_R = 1
    POS_S = 2
    NEG_Q = 3
    POS_R = 4
    NEG_S = 5
    UNDEFINED = 6

    @property
    def opposite(self) -> 'Direction':
        if self is Direction.UNDEFINED:
            return self
        return Direction((self + 3) % 6)


class Diagonal(IntEnum):
    """The six corners of a hex. UNDEFINED is a table placeholder only."""
    POS_Q = 0
    NEG_R = 1
    POS_S = 2
    NEG_Q = 3
    POS_R = 4
    NEG_S = 5
    UNDEFINED = 6


@dataclass(frozen=True, eq=True)
class Delta:
    """
    Displacement between two hexes in Cube form.
    A delta whose components do not sum to zero is a bug in the caller.
    """
    dq: int
    dr: int
    ds: int

    def __post_init__(self):
        if self.dq + self.dr + self.ds != 0:
            raise ValueError(
                f"Delta components must sum to zero, got ({self.dq}, {self.dr}, {self.ds})"
            )

    def hex(self) -> 'Hex':
        """The hex reached by applying this delta to the origin hex."""
        return Hex(self.dq, self.dr)

    def abs(self) -> Tuple[int, int, int]:
        # The absolute values no longer sum to zero, so this is a plain tuple.
        return (abs(self.dq), abs(self.dr), abs(self.ds))

    def __add__(self, other: 'Delta') -> 'Delta':
        return Delta(self.dq + other.dq, self.dr + other.dr, self.ds + other.ds)

    def __mul__(self, k: int) -> 'Delta':
        return delta_scale(self, k)

    __rmul__ = __mul__

    def __neg__(self) -> 'Delta':
        return Delta(-self.dq, -self.dr, -self.ds)


@dataclass(frozen=True, eq=True)
class Hex:
    """
    Immutable Hexagon coordinate in Axial format.
    Frozen allows this to be used as dictionary keys and set members.
    """
    q: int
    r: int

    @property
    def s(self) -> int:
        """Calculates the implicit third cube coordinate."""
        return -self.q - self.r

    def cube(self) -> Tuple[int, int, int]:
        return (self.q, self.r, self.s)

    def delta(self) -> Delta:
        """Offset of this hex from Hex(0, 0)."""
        return Delta(self.q, self.r, self.s)

    def neighbor(self, direction: Direction) -> 'Hex':
        return hex_neighbor(self, direction)

    def diagonal(self, diagonal: Diagonal) -> 'Hex':
        return hex_diagonal(self, diagonal)

    def __add__(self, other: Delta) -> 'Hex':
        return hex_add(self, other)

    def __sub__(self, other: 'Hex') -> Delta:
        return hex_subtract(self, other)

    def __repr__(self):
        return f"Hex({self.q}, {self.r})"

# --- Constants ---

# Edge neighbors, indexed by Direction. Positive axes first, then negative.
NEIGHBOR_DELTAS: Dict[Direction, Delta] = {
    Direction.POS_Q: Delta(1, 0, -1),
    Direction.NEG_R: Delta(1, -1, 0),
    Direction.POS_S: Delta(0, -1, 1),
    Direction.NEG_Q: Delta(-1, 0, 1),
    Direction.POS_R: Delta(-1, 1, 0),
    Direction.NEG_S: Delta(0, 1, -1),
    Direction.UNDEFINED: Delta(0, 0, 0),
}

# Corner neighbors (two steps away through a shared vertex), indexed by Diagonal.
DIAGONAL_DELTAS: Dict[Diagonal, Delta] = {
    Diagonal.POS_Q: Delta(2, -1, -1),
    Diagonal.NEG_R: Delta(1, -2, 1),
    Diagonal.POS_S: Delta(-1, -1, 2),
    Diagonal.NEG_Q: Delta(-2, 1, 1),
    Diagonal.POS_R: Delta(-1, 2, -1),
    Diagonal.NEG_S: Delta(1, 1, -2),
    Diagonal.UNDEFINED: Delta(0, 0, 0),
}

# --- Core Math Functions ---

def hex_add(a: Hex, d: Delta) -> Hex:
    return Hex(a.q + d.dq, a.r + d.dr)

def hex_subtract(a: Hex, b: Hex) -> Delta:
    """Delta that moves b onto a (a - b)."""
    dq = a.q - b.q
    dr = a.r - b.r
    return Delta(dq, dr, -dq - dr)

def delta_scale(d: Delta, k: int) -> Delta:
    return Delta(d.dq * k, d.dr * k, d.ds * k)

def hex_rotate_clockwise(origin: Hex, moving: Hex) -> Hex:
    """Rotates `moving` 60 degrees clockwise around `origin`."""
    before = hex_subtract(moving, origin)
    after = Delta(-before.dr, -before.ds, -before.dq)
    return hex_add(origin, after)

def hex_rotate_counter_clockwise(origin: Hex, moving: Hex) -> Hex:
    """Rotates `moving` 60 degrees counter clockwise around `origin`."""
    before = hex_subtract(moving, origin)
    after = Delta(-before.ds, -before.dq, -before.dr)
    return hex_add(origin, after)

def hex_length(d: Delta) -> int:
    """Number of single steps needed to cover the delta."""
    aq, ar, as_ = d.abs()
    return (aq + ar + as_) // 2

def hex_distance(a: Hex, b: Hex) -> int:
    """
    Calculates the Manhattan distance between two hexes.
    Formula: (|dq| + |dr| + |ds|) / 2
    """
    return hex_length(hex_subtract(a, b))

def hex_direction(d: Delta) -> Direction:
    """
    Classifies a delta into one of the six edge directions.
    The dominant axis wins; ties go to Q, then R, then S.
    """
    aq, ar, as_ = d.abs()
    if aq >= ar and aq >= as_:
        return Direction.NEG_Q if d.dq < 0 else Direction.POS_Q
    if ar >= as_:
        return Direction.NEG_R if d.dr < 0 else Direction.POS_R
    return Direction.NEG_S if d.ds < 0 else Direction.POS_S

def neighbor_delta(direction: Direction) -> Delta:
    return NEIGHBOR_DELTAS[direction]

def diagonal_delta(diagonal: Diagonal) -> Delta:
    return DIAGONAL_DELTAS[diagonal]

def hex_neighbor(h: Hex, direction: Direction) -> Hex:
    """One step across an edge. UNDEFINED leaves the hex where it is."""
    return hex_add(h, NEIGHBOR_DELTAS[direction])

def hex_diagonal(h: Hex, diagonal: Diagonal) -> Hex:
    """One step across a corner. UNDEFINED leaves the hex where it is."""
    return hex_add(h, DIAGONAL_DELTAS[diagonal])

def hex_neighbors(h: Hex) -> List[Hex]:
    """Returns the 6 adjacent hexes, in Direction order."""
    return [hex_add(h, NEIGHBOR_DELTAS[Direction(i)]) for i in range(6)]

# --- Line of Sight & Geometry ---

def _round_half_away(x: float) -> float:
    """Rounds to the nearest integer, halves away from zero."""
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        return whole + math.copysign(1.0, x)
    return float(whole)

def _lerp(a: float, b: float, t: float) -> float:
    """Linear Interpolation between a and b."""
    return a + (b - a) * t

def cube_round(frac_q: float, frac_r: float, frac_s: float) -> Hex:
    """
    Rounds floating point cube coordinates to the nearest valid integer Hex.
    Maintains the constraint q + r + s = 0.
    """
    q = _round_half_away(frac_q)
    r = _round_half_away(frac_r)
    s = _round_half_away(frac_s)

    q_diff = abs(q - frac_q)
    r_diff = abs(r - frac_r)
    s_diff = abs(s - frac_s)

    # Reset the component with the largest change to satisfy constraint
    if q_diff > r_diff and q_diff > s_diff:
        q = -r - s
    elif r_diff > s_diff:
        r = -q - s
    else:
        s = -q - r

    return Hex(int(q), int(r))

def hex_linedraw(start: Hex, end: Hex) -> List[Hex]:
    """
    Returns the Hexes forming a straight line between start and end,
    both included. Consecutive entries are always neighbors.
    """
    n = hex_distance(start, end)
    if n == 0:
        return [start]

    step = hex_direction(hex_subtract(end, start))
    sq, sr, ss = start.cube()
    eq, er, es = end.cube()

    results: List[Hex] = []
    visited: Set[Hex] = set()
    for i in range(n + 1):
        t = i / n
        current = cube_round(_lerp(sq, eq, t), _lerp(sr, er, t), _lerp(ss, es, t))
        # Two samples rounding onto one hex: push forward along the line.
        while current in visited:
            logger.debug(f"Line {start} -> {end}: sample {i} collided at {current}")
            current = hex_neighbor(current, step)
        visited.add(current)
        results.append(current)

    if results[-1] != end:
        results.append(end)
    return results

# --- Range & Area ---

def hex_range(center: Hex, radius: int) -> Set[Hex]:
    """
    All hexes within `radius` steps of the center (filled hexagon).
    Useful for 'Area of Effect' or Movement Range lookups.
    """
    results: Set[Hex] = set()
    if radius < 1:
        logger.debug(f"Range around {center} with radius {radius} is empty")
        return results

    for x in range(-radius, radius + 1):
        # y loop bounds depend on x to maintain hex shape
        y1 = max(-radius, -x - radius)
        y2 = min(radius, -x + radius)
        for y in range(y1, y2 + 1):
            z = -x - y
            results.add(hex_add(center, Delta(x, z, y)))
    return results

def hex_ring(center: Hex, radius: int) -> Set[Hex]:
    """Only the hexes at exactly distance == radius."""
    results: Set[Hex] = set()
    if radius < 1:
        logger.debug(f"Ring around {center} with radius {radius} is empty")
        return results

    # Start at the POS_S corner; the edge leaving it runs two directions later.
    current = hex_add(center, delta_scale(NEIGHBOR_DELTAS[Direction.POS_S], radius))
    for i in range(6):
        side = NEIGHBOR_DELTAS[Direction((Direction.POS_S + 2 + i) % 6)]
        for _ in range(radius):
            results.add(current)
            current = hex_add(current, side)
    return results

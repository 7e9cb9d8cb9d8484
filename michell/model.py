# Node, Element and planar member geometry

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class Node:
    """A truss joint: a point in the plane. Its id is its position in the node list."""
    x: float
    y: float


@dataclass(frozen=True)
class Element:
    """
    Directed member between two joints (start → end).

    Elements are views derived from (node list, topology). They are rebuilt
    from the truss whenever they are needed and are never stored.
    """
    start: Node
    end: Node

    @property
    def length(self) -> float:
        return float(np.hypot(self.end.x - self.start.x, self.end.y - self.start.y))

    @property
    def midpoint(self) -> Tuple[float, float]:
        return (0.5 * (self.start.x + self.end.x), 0.5 * (self.start.y + self.end.y))

    def direction_cosines(self) -> Tuple[float, float]:
        _, c, s = element_geometry(self.start, self.end)
        return c, s


def element_geometry(ni: Node, nj: Node) -> Tuple[float, float, float]:
    """
    Length and direction cosines of the member ni → nj.

    Returns:
    --------
    (L, c, s) with c = dx/L and s = dy/L, pointing from ni towards nj.

    Raises:
    -------
    ValueError
        If both joints sit at the same location.
    """
    dx = nj.x - ni.x
    dy = nj.y - ni.y
    L = float(np.hypot(dx, dy))
    if L <= 0.0:
        raise ValueError(f"Member has zero length (both ends at ({ni.x}, {ni.y})).")
    return L, dx / L, dy / L

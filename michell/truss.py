# michell/truss.py
"""
TRUSS: Geometry + Topology + Analysis Results
=============================================

A Truss owns:
- nodes:     ordered list of Node (list index = joint id)
- topology:  TrussGraph of directed members over those ids
- forces:    member forces (after solve), in element order
- reactions: support reactions (after solve), in fixity order
- performance: sum(|f| * l) (after score)
- search:    how the generator arrived at this geometry

ELEMENT ORDER:
--------------
Elements are derived, never cached:

    for v in 0 .. N-1:
        for w in topology.adj(v):      # insertion order
            Element(nodes[v], nodes[w])

Force i always belongs to element i of that walk.

LIFECYCLE:
----------
    truss = generate(ne, h, L)   # geometry + topology, set together
    solve(truss, supports, loads) # forces + reactions
    score(truss)                  # performance

Changing parameters means generating a NEW truss. A solved truss is never
edited in place.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .graph import TrussGraph
from .model import Element, Node


@dataclass(frozen=True)
class SearchStatus:
    """
    Outcome of the generator's search over gama.

    converged : bool
        True if some attempt put the load point within tolerance of the target.
        False means the last attempt was accepted anyway.
    attempts : int
        Number of rejected attempts before the accepted one.
    gama : float
        Accepted free angle (degrees).
    load_distance : float
        Distance of the generated load point from the supports (Lp).
    target : float
        Requested load distance L.
    """
    converged: bool
    attempts: int
    gama: float
    load_distance: float
    target: float


class Truss:
    """Planar pin-jointed truss: nodes, directed member graph and analysis results."""

    def __init__(
        self,
        nodes: Optional[Sequence[Node]] = None,
        topology: Optional[TrussGraph] = None,
        search: Optional[SearchStatus] = None,
    ):
        self._nodes: List[Node] = list(nodes) if nodes is not None else []
        self._topology = topology if topology is not None else TrussGraph(len(self._nodes))
        if self._topology.V != len(self._nodes):
            raise ValueError(
                f"Topology has {self._topology.V} vertices but {len(self._nodes)} nodes were given."
            )
        self.search = search
        self.forces: Optional[np.ndarray] = None
        self.reactions: Optional[np.ndarray] = None
        self.performance: Optional[float] = None

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    @property
    def topology(self) -> TrussGraph:
        return self._topology

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def num_elements(self) -> int:
        return self._topology.E

    @property
    def is_solved(self) -> bool:
        return self.forces is not None

    def elements(self) -> List[Element]:
        """Derive the element list from the current nodes and topology."""
        return [Element(self._nodes[v], self._nodes[w]) for v, w in self._topology.edges()]

    def members(self) -> List[Tuple[int, int]]:
        """(start, end) joint ids for every member, in element order."""
        return list(self._topology.edges())

    def coordinates(self) -> np.ndarray:
        """Node coordinate matrix, shape (N, 2)."""
        return np.array([[n.x, n.y] for n in self._nodes], dtype=float).reshape(-1, 2)

    def __repr__(self) -> str:
        state = "solved" if self.is_solved else "unsolved"
        return f"Truss(nodes={self.num_nodes}, members={self.num_elements}, {state})"

# michell/graph.py
"""
TRUSS GRAPH: Directed Topology over Joint Indices
=================================================

A truss topology is a digraph: vertex v is joint v, and a directed edge
v → w is a member that starts at joint v and ends at joint w.

The representation is a vertex-indexed list of adjacency lists. Two
operations matter:
- add a directed edge (a member)
- iterate over the joints adjacent from a given joint

Member ORDER is defined by this structure: vertex ids ascending, then each
vertex's successors in insertion order. Force vectors produced by the
solver follow exactly that order, so never reorder an adjacency list.

Duplicate edges and self-loops are not rejected. The generator never
produces them, but the graph itself does not forbid them.
"""

from typing import Iterator, List, Tuple


class TrussGraph:
    """
    Directed adjacency-list graph with a fixed vertex count.

    Parameters:
    -----------
    V : int
        Number of vertices (truss joints). Must be >= 0.

    Examples:
    ---------
    >>> g = TrussGraph(3)
    >>> g.add_edge(0, 2)
    >>> g.add_edge(1, 2)
    >>> list(g.adj(0)), g.E
    ([2], 2)
    """

    def __init__(self, V: int):
        if V < 0:
            raise ValueError("Number of nodes must be nonnegative")
        self._V = V
        self._E = 0
        self._adj: List[List[int]] = [[] for _ in range(V)]

    def _validate(self, v: int) -> None:
        if v < 0 or v >= self._V:
            raise IndexError(f"index {v} is not between 0 and {self._V}")

    @property
    def V(self) -> int:
        """Number of vertices (joints)."""
        return self._V

    @property
    def E(self) -> int:
        """Number of directed edges (members)."""
        return self._E

    def add_edge(self, v: int, w: int) -> None:
        """Add the directed edge v → w."""
        self._validate(v)
        self._validate(w)
        self._adj[v].append(w)
        self._E += 1

    def adj(self, v: int) -> Tuple[int, ...]:
        """
        Vertices adjacent from v, in insertion order.

        The snapshot can be iterated any number of times and does not change
        when edges are added later.
        """
        self._validate(v)
        return tuple(self._adj[v])

    def edges(self) -> Iterator[Tuple[int, int]]:
        """All (v, w) pairs in member order."""
        for v in range(self._V):
            for w in self._adj[v]:
                yield v, w

    def __str__(self) -> str:
        lines = [f"{self._V} vertices, {self._E} edges "]
        for v in range(self._V):
            lines.append(f"{v}: " + "".join(f"{w} " for w in self._adj[v]))
        return "\n".join(lines) + "\n"

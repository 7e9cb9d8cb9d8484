# michell/kernel/dof.py
"""
DOF MANAGER: Equilibrium Equation Indexing
==========================================

PURPOSE:
--------
The method of joints writes two equilibrium equations per joint:

    ΣFx = 0   → row 2·n
    ΣFy = 0   → row 2·n + 1

This module owns that mapping, plus the axis codes used by support
definitions (1 = X, 2 = Y, matching the classic S-matrix convention).

USAGE:
------
    dof = DOFManager()
    dof.idx(node_id=3, axis=Axis.Y)   # → 7
    dof.ndof(6)                       # → 12
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List


class Axis(IntEnum):
    """Constrained / loaded direction at a joint."""
    X = 1
    Y = 2


@dataclass(frozen=True)
class DOFManager:
    """
    Maps (joint, axis) to a global equation index.

    Attributes:
    -----------
    dof_per_node : int
        Equations per joint. A planar pin joint has 2 (ΣFx, ΣFy).

    Examples:
    ---------
    >>> dof = DOFManager()
    >>> dof.idx(0, Axis.X)
    0
    >>> dof.idx(1, Axis.Y)
    3
    >>> dof.node_dofs(2)
    [4, 5]
    """
    dof_per_node: int = 2

    def idx(self, node_id: int, axis: int) -> int:
        """
        Global equation index for a joint and an axis code.

        Raises:
        -------
        ValueError
            If axis is not 1 (X) or 2 (Y).
        """
        try:
            local = Axis(int(axis)) - 1
        except ValueError:
            raise ValueError(f"Axis code must be 1 (X) or 2 (Y), got {axis!r}") from None
        return self.dof_per_node * node_id + local

    def ndof(self, n_nodes: int) -> int:
        return self.dof_per_node * n_nodes

    def node_dofs(self, node_id: int) -> List[int]:
        base = self.dof_per_node * node_id
        return list(range(base, base + self.dof_per_node))


DOF_2D_JOINT = DOFManager(dof_per_node=2)   # ΣFx, ΣFy

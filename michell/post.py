# member force table and joint equilibrium residuals

from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from .kernel.dof import DOF_2D_JOINT
from .truss import Truss


def _require_forces(truss: Truss) -> None:
    if truss.forces is None:
        raise ValueError("Truss has no member forces; run solve() first.")


def joint_residuals(
    truss: Truss,
    supports: Sequence[Tuple[int, int]],
    loads: Sequence[Tuple[int, float, float]],
) -> np.ndarray:
    """
    Out-of-balance force at every joint, shape (N, 2).

    At each joint we sum:
    - member force × unit vector from the joint towards the member's far end
    - the reaction of every fixity acting on the joint
    - the applied load

    For a correct solution every row is (0, 0) up to round-off. The sum is
    built from element geometry directly, not from the solver's matrix.
    """
    _require_forces(truss)
    residual = np.zeros((truss.num_nodes, 2), dtype=float)

    for (v, w), element, f in zip(truss.members(), truss.elements(), truss.forces):
        ux = (element.end.x - element.start.x) / element.length
        uy = (element.end.y - element.start.y) / element.length
        residual[v] += f * np.array([ux, uy])
        residual[w] -= f * np.array([ux, uy])

    if truss.reactions is not None:
        for (n, axis), r in zip(supports, truss.reactions):
            row = DOF_2D_JOINT.idx(n, axis)
            residual[n, row - 2 * n] += r

    for n, fx, fy in loads:
        residual[int(n)] += (fx, fy)

    return residual


def member_table(truss: Truss) -> pd.DataFrame:
    """
    One row per member, in element order.

    Columns: member, start, end, length, force, kind ('T' tension,
    'C' compression, '0' zero force), force_x_length (|f| · l).
    """
    _require_forces(truss)
    rows = []
    for i, ((v, w), element, f) in enumerate(zip(truss.members(), truss.elements(), truss.forces)):
        f = float(f)
        if np.isclose(f, 0.0, atol=1e-9):
            kind = '0'
        else:
            kind = 'T' if f > 0 else 'C'
        rows.append({
            'member': i,
            'start': v,
            'end': w,
            'length': element.length,
            'force': f,
            'kind': kind,
            'force_x_length': abs(f) * element.length,
        })
    columns = ['member', 'start', 'end', 'length', 'force', 'kind', 'force_x_length']
    return pd.DataFrame(rows, columns=columns)

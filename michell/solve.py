# Truss-level solve interface: supports + loads → member forces and reactions

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import CONFIG
from .kernel.dof import Axis
from .kernel.solve import joint_method
from .performance import score
from .truss import Truss

logger = logging.getLogger(__name__)

Support = Tuple[int, int]
Load = Tuple[int, float, float]


def pinned_supports(*node_ids: int) -> List[Support]:
    """Fix X and Y at each given joint: [(n, X), (n, Y), ...]."""
    supports = []
    for n in node_ids:
        supports.append((n, Axis.X))
        supports.append((n, Axis.Y))
    return supports


def solve(
    truss: Truss,
    supports: Sequence[Support],
    loads: Sequence[Load],
    cond_limit: float = CONFIG.cond_limit,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Solve member forces and reactions of a truss by the method of joints.

    Builds the N / T / S / L matrices from the truss, runs joint_method and
    stores forces and reactions on the truss. Any previous performance
    value is cleared, since it belonged to the old forces.

    Raises IndeterminateError, MechanismError, IndexError or ValueError
    (see michell.kernel.solve.joint_method).
    """
    N = truss.coordinates()
    T = np.array(truss.members(), dtype=float).reshape(-1, 2)
    S = np.array([(n, int(a)) for n, a in supports], dtype=float).reshape(-1, 2)
    L = np.array(list(loads), dtype=float).reshape(-1, 3)

    forces, reactions = joint_method(N, T, S, L, cond_limit=cond_limit)

    truss.forces = forces
    truss.reactions = reactions
    truss.performance = None
    logger.debug("Solved %r: max |f| = %.4g", truss, np.abs(forces).max() if forces.size else 0.0)
    return forces, reactions


def analyze(truss: Truss, load: float = CONFIG.load) -> Optional[float]:
    """
    Standard Michell load case: both supports pinned, vertical load on the last joint.

    Supports are joints 0 and 1 (fixed in X and Y), and the load
    (N-1, 0, load) sits on the load node. Solves, scores and returns the
    performance index.
    """
    supports = pinned_supports(0, 1)
    loads = [(truss.num_nodes - 1, 0.0, load)]
    solve(truss, supports, loads)
    return score(truss)

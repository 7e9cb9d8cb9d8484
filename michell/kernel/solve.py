# michell/kernel/solve.py
"""Method of joints solver, determinacy check and error types."""

import logging
from typing import Tuple

import numpy as np

from .assemble import assemble_joint_matrix, assemble_load_vector
from .dof import DOF_2D_JOINT

logger = logging.getLogger(__name__)


class IndeterminateError(ValueError):
    """Raised when 2·N != M + K, so the method of joints cannot be applied."""
    pass


class MechanismError(RuntimeError):
    """Raised when the joint matrix is singular or ill-conditioned (degenerate geometry)."""
    pass


class ConvergenceError(RuntimeError):
    """Raised when an iterative search does not converge."""
    pass


def _as_table(a, columns: int, name: str) -> np.ndarray:
    arr = np.asarray(a, dtype=float)
    if arr.size == 0:
        return np.zeros((0, columns), dtype=float)
    arr = arr.reshape(-1, columns) if arr.ndim == 1 else arr
    if arr.ndim != 2 or arr.shape[1] != columns:
        raise ValueError(f"{name} must have shape (rows, {columns}), got {arr.shape}")
    return arr


def _check_indices(values: np.ndarray, n_nodes: int, name: str) -> None:
    for v in values.ravel():
        if v != int(v) or not 0 <= v < n_nodes:
            raise IndexError(f"{name} references joint {v}, not between 0 and {n_nodes}")


def joint_method(
    N,
    T,
    S,
    L,
    cond_limit: float = 1e12,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Solve a statically determinate planar truss by the method of joints.

    Parameters:
    -----------
    N : array_like, shape (n, 2)
        Joint coordinates: N[j] = (x, y)
    T : array_like, shape (m, 2)
        Member topology: T[i] = (start joint, end joint)
    S : array_like, shape (k, 2)
        Fixities: S[f] = (joint, axis) with axis 1 = X, 2 = Y
    L : array_like, shape (p, 3)
        Loads: L[q] = (joint, Fx, Fy)
    cond_limit : float
        Max condition number of A before raising MechanismError

    Returns:
    --------
    F : np.ndarray, shape (m,)
        Member forces (tension positive, compression negative)
    R : np.ndarray, shape (k,)
        Reaction developed by each fixity, in fixity order

    Raises:
    -------
    IndeterminateError
        If 2n != m + k (checked before anything is assembled)
    IndexError
        If a member, fixity or load references a joint outside [0, n)
    ValueError
        Unknown axis code or zero-length member
    MechanismError
        If A is singular or ill-conditioned
    """
    N = _as_table(N, 2, "N")
    T = _as_table(T, 2, "T")
    S = _as_table(S, 2, "S")
    L = _as_table(L, 3, "L")

    n_nodes = N.shape[0]
    n_elements = T.shape[0]
    n_fixities = S.shape[0]
    dofs = DOF_2D_JOINT.ndof(n_nodes)

    if dofs != n_elements + n_fixities:
        raise IndeterminateError(
            f"The truss is indeterminate: 2·N = {dofs} but M + K = "
            f"{n_elements} + {n_fixities} = {n_elements + n_fixities}."
        )

    _check_indices(T, n_nodes, "Member")
    _check_indices(S[:, 0], n_nodes, "Fixity")
    _check_indices(L[:, 0], n_nodes, "Load")

    A = assemble_joint_matrix(N, T, S)
    Q = assemble_load_vector(n_nodes, L)
    logger.debug("Assembled joint system: %d equations, %d members, %d fixities",
                 dofs, n_elements, n_fixities)

    if dofs == 0:
        return np.zeros(0), np.zeros(0)

    cond = np.linalg.cond(A)
    logger.debug("Joint matrix condition number: %.3e", cond)
    if not np.isfinite(cond) or cond > cond_limit:
        raise MechanismError(
            f"Singular joint matrix (cond={cond:.2e}). Check for collinear members or "
            f"missing supports. Need cond < {cond_limit:.0e}."
        )

    try:
        x = np.linalg.solve(A, -Q)
    except np.linalg.LinAlgError as e:
        raise MechanismError(f"Joint matrix could not be solved: {e}") from e

    return x[:n_elements], x[n_elements:]

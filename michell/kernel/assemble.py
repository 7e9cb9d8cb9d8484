# michell/kernel/assemble.py
"""
ASSEMBLY: Joint Equilibrium Matrix and Load Vector
==================================================

PURPOSE:
--------
Build the square system of the method of joints:

    A · x = -Q

where x = [f_0 ... f_{m-1}, r_0 ... r_{k-1}] holds m member forces followed
by k support reactions.

COLUMN LAYOUT:
--------------
Member i from joint n1 to joint n2, with direction cosines (c, s) pointing
n1 → n2:

    A[(n1, X), i] = +c        A[(n2, X), i] = -c
    A[(n1, Y), i] = +s        A[(n2, Y), i] = -s

So a positive f_i pulls both joints towards each other (tension positive).

Fixity j acting on joint n along axis a puts a unit entry in column m + j,
on the equation row of (n, a).

Q scatters each loaded joint's (Fx, Fy) into its two equation rows.
"""

import numpy as np

from ..model import Node, element_geometry
from .dof import Axis, DOFManager, DOF_2D_JOINT


def assemble_joint_matrix(
    N: np.ndarray,
    T: np.ndarray,
    S: np.ndarray,
    dof: DOFManager = DOF_2D_JOINT,
) -> np.ndarray:
    """
    Assemble the (dof × dof) force projection matrix A.

    Parameters:
    -----------
    N : np.ndarray
        Joint coordinates, shape (n, 2)
    T : np.ndarray
        Member topology, shape (m, 2): start and end joint of each member
    S : np.ndarray
        Fixities, shape (k, 2): joint index and axis code (1 = X, 2 = Y)
    dof : DOFManager
        Equation indexing for every (joint, axis) row

    Returns:
    --------
    np.ndarray
        A, shape (dof.ndof(n), m + k). Square when the truss is determinate.

    Raises:
    -------
    ValueError
        Zero-length member or unknown axis code.
    """
    n_nodes = N.shape[0]
    n_elements = T.shape[0]
    n_fixities = S.shape[0]
    A = np.zeros((dof.ndof(n_nodes), n_elements + n_fixities), dtype=float)

    for i in range(n_elements):
        n1, n2 = int(T[i, 0]), int(T[i, 1])
        _, c, s = element_geometry(Node(*N[n1]), Node(*N[n2]))
        A[dof.idx(n1, Axis.X), i] = c
        A[dof.idx(n1, Axis.Y), i] = s
        A[dof.idx(n2, Axis.X), i] = -c
        A[dof.idx(n2, Axis.Y), i] = -s

    for j in range(n_fixities):
        row = dof.idx(int(S[j, 0]), int(S[j, 1]))
        A[row, n_elements + j] = 1.0

    return A


def assemble_load_vector(
    n_nodes: int,
    L: np.ndarray,
    dof: DOFManager = DOF_2D_JOINT,
) -> np.ndarray:
    """
    Scatter joint loads into the global load vector Q.

    L has one row per loaded joint: (joint index, Fx, Fy). A joint listed
    twice takes the last row, matching a plain set rather than an add.
    """
    Q = np.zeros(dof.ndof(n_nodes), dtype=float)
    for row in L:
        n = int(row[0])
        Q[dof.idx(n, Axis.X)] = row[1]
        Q[dof.idx(n, Axis.Y)] = row[2]
    return Q

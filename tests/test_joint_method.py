# tests/test_joint_method.py
"""
METHOD OF JOINTS: Validation against hand calculations
======================================================

1. Two-bar Michell base case (ne = 2, h = 4, L = 40, load 80 upward)
   Tip joint at (40, 0), bars to (0, ±2), length l = sqrt(1604).
   Vertical equilibrium at the tip: 2·(2/l)·|f| = 80  →  |f| = 20·l
   Top bar in compression, bottom bar in tension.

2. Symmetric triangle (pin + roller, 10 down at the apex)
   Rafters: -10/√2 (compression), tie: +5 (tension), reactions 5 + 5.

3. Failure modes: indeterminate counts, singular (collinear) geometry,
   bad indices and axis codes.
"""

import numpy as np
import pytest

from michell import generate, solve, pinned_supports
from michell.graph import TrussGraph
from michell.kernel.assemble import assemble_joint_matrix, assemble_load_vector
from michell.kernel.dof import Axis, DOFManager
from michell.kernel.solve import IndeterminateError, MechanismError, joint_method
from michell.model import Node
from michell.truss import Truss


# =============================================================================
# Base case scenario
# =============================================================================

class TestBaseCase:

    supports = [(0, Axis.X), (0, Axis.Y), (1, Axis.X), (1, Axis.Y)]
    loads = [(2, 0.0, 80.0)]

    def test_member_forces(self):
        truss = generate(2, 4, 40)
        forces, reactions = solve(truss, self.supports, self.loads)

        l = np.sqrt(1604.0)
        np.testing.assert_allclose(forces, [-20.0 * l, 20.0 * l], rtol=1e-10)
        assert truss.forces is forces
        assert truss.reactions is reactions

    def test_reactions(self):
        truss = generate(2, 4, 40)
        _, reactions = solve(truss, self.supports, self.loads)

        np.testing.assert_allclose(reactions, [800.0, -40.0, -800.0, -40.0], rtol=1e-10)
        # reactions balance the applied load
        assert reactions[0] + reactions[2] == pytest.approx(0.0, abs=1e-9)
        assert reactions[1] + reactions[3] == pytest.approx(-80.0)

    def test_tip_equilibrium(self):
        """Σ f · (unit vector tip → far end) + load = 0 at joint 2."""
        truss = generate(2, 4, 40)
        forces, _ = solve(truss, self.supports, self.loads)

        tip = np.array([40.0, 0.0])
        total = np.array([0.0, 80.0])
        for far, f in zip([np.array([0.0, 2.0]), np.array([0.0, -2.0])], forces):
            u = (far - tip) / np.linalg.norm(far - tip)
            total += f * u
        np.testing.assert_allclose(total, [0.0, 0.0], atol=1e-9)

    def test_integer_axis_codes_accepted(self):
        truss = generate(2, 4, 40)
        forces, _ = solve(truss, [(0, 1), (0, 2), (1, 1), (1, 2)], self.loads)
        assert forces.shape == (2,)


# =============================================================================
# Array-level solver
# =============================================================================

def triangle_arrays():
    N = np.array([[0.0, 0.0], [4.0, 0.0], [2.0, 2.0]])
    T = np.array([[0, 1], [0, 2], [1, 2]])
    S = np.array([[0, 1], [0, 2], [1, 2]])   # pin at 0, roller (Y) at 1
    L = np.array([[2, 0.0, -10.0]])
    return N, T, S, L


def test_triangle_forces_and_reactions():
    F, R = joint_method(*triangle_arrays())

    np.testing.assert_allclose(F, [5.0, -10.0 / np.sqrt(2), -10.0 / np.sqrt(2)], rtol=1e-10)
    np.testing.assert_allclose(R, [0.0, 5.0, 5.0], atol=1e-10)


def test_joint_matrix_layout():
    N, T, S, _ = triangle_arrays()
    A = assemble_joint_matrix(N, T, S)
    assert A.shape == (6, 6)

    c = 1.0 / np.sqrt(2)
    # member 1: 0 → 2 at 45°
    np.testing.assert_allclose(A[:, 1], [c, c, 0, 0, -c, -c])
    # fixity 2: joint 1, Y
    np.testing.assert_array_equal(A[:, 5], [0, 0, 0, 1, 0, 0])
    # each member column sums to zero (equal and opposite at both ends)
    np.testing.assert_allclose(A[:, :3].sum(axis=0), 0.0, atol=1e-12)


def test_load_vector_scatter():
    Q = assemble_load_vector(3, np.array([[2, 1.5, -10.0], [0, 0.0, 3.0]]))
    np.testing.assert_array_equal(Q, [0.0, 3.0, 0.0, 0.0, 1.5, -10.0])


def test_assembly_follows_dof_manager():
    """With 3 equations per joint, every entry lands on dof.idx rows only."""
    N, T, S, _ = triangle_arrays()
    dof = DOFManager(dof_per_node=3)
    A = assemble_joint_matrix(N, T, S, dof)
    assert A.shape == (9, 6)

    c = 1.0 / np.sqrt(2)
    np.testing.assert_allclose(A[:, 1], [c, c, 0, 0, 0, 0, -c, -c, 0])
    # fixity 2: joint 1, Y
    np.testing.assert_array_equal(A[:, 5], [0, 0, 0, 0, 1, 0, 0, 0, 0])
    # third row of each joint is never touched
    np.testing.assert_array_equal(A[[2, 5, 8], :], 0.0)

    Q = assemble_load_vector(3, np.array([[2, 1.5, -10.0]]), dof)
    np.testing.assert_array_equal(Q, [0, 0, 0, 0, 0, 0, 1.5, -10.0, 0])


def test_dof_indexing():
    dof = DOFManager()
    assert dof.idx(0, Axis.X) == 0
    assert dof.idx(3, Axis.Y) == 7
    assert dof.ndof(6) == 12
    assert dof.node_dofs(2) == [4, 5]
    with pytest.raises(ValueError):
        dof.idx(0, 3)


def test_indeterminate_counts():
    N, T, S, L = triangle_arrays()
    with pytest.raises(IndeterminateError):
        joint_method(N, T, S[:2], L)          # 6 equations, 5 unknowns
    with pytest.raises(IndeterminateError):
        joint_method(N, T, np.vstack([S, [[1, 1]]]), L)   # 7 unknowns


def test_indeterminate_checked_before_index_validation():
    N, _, S, L = triangle_arrays()
    T = np.array([[0, 99]])
    with pytest.raises(IndeterminateError):
        joint_method(N, T, S, L)


def test_collinear_geometry_is_singular():
    """All members horizontal: no vertical stiffness at joint 2."""
    N = np.array([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]])
    T = np.array([[0, 2], [1, 2]])
    S = np.array([[0, 1], [0, 2], [1, 1], [1, 2]])
    L = np.array([[2, 0.0, -1.0]])
    with pytest.raises(MechanismError):
        joint_method(N, T, S, L)


def test_bad_member_index():
    N, _, S, L = triangle_arrays()
    T = np.array([[0, 1], [0, 2], [1, 3]])
    with pytest.raises(IndexError):
        joint_method(N, T, S, L)


def test_bad_load_index():
    N, T, S, _ = triangle_arrays()
    with pytest.raises(IndexError):
        joint_method(N, T, S, np.array([[7, 0.0, -1.0]]))


def test_bad_axis_code():
    N, T, _, L = triangle_arrays()
    S = np.array([[0, 1], [0, 2], [1, 3]])
    with pytest.raises(ValueError):
        joint_method(N, T, S, L)


def test_zero_length_member():
    N = np.array([[0.0, 0.0], [4.0, 0.0], [4.0, 0.0]])
    T = np.array([[0, 1], [0, 2], [1, 2]])
    S = np.array([[0, 1], [0, 2], [1, 2]])
    L = np.array([[2, 0.0, -10.0]])
    with pytest.raises(ValueError):
        joint_method(N, T, S, L)


def test_unloaded_truss_has_zero_forces():
    N, T, S, _ = triangle_arrays()
    F, R = joint_method(N, T, S, np.zeros((0, 3)))
    np.testing.assert_allclose(F, 0.0, atol=1e-12)
    np.testing.assert_allclose(R, 0.0, atol=1e-12)


# =============================================================================
# Truss-level solve
# =============================================================================

def test_hand_built_indeterminate_truss():
    """An extra member on the base case breaks 2N = M + K."""
    nodes = [Node(0.0, 2.0), Node(0.0, -2.0), Node(40.0, 0.0)]
    g = TrussGraph(3)
    g.add_edge(0, 2)
    g.add_edge(1, 2)
    g.add_edge(0, 1)
    truss = Truss(nodes, g)

    with pytest.raises(IndeterminateError):
        solve(truss, pinned_supports(0, 1), [(2, 0.0, 80.0)])
    assert truss.forces is None


def test_pinned_supports_helper():
    assert pinned_supports(0, 1) == [(0, Axis.X), (0, Axis.Y), (1, Axis.X), (1, Axis.Y)]


def test_resolve_clears_stale_performance():
    truss = generate(2, 4, 40)
    solve(truss, pinned_supports(0, 1), [(2, 0.0, 80.0)])
    truss.performance = 1.0
    solve(truss, pinned_supports(0, 1), [(2, 0.0, 40.0)])
    assert truss.performance is None

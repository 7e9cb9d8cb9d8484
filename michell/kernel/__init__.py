# michell/kernel - Method of joints core
"""
KERNEL: ARRAY-LEVEL STATICS
===========================

Everything here works on plain numpy arrays, in the matrix form used by the
classic method of joints:

    N  (n × 2)  joint coordinates
    T  (m × 2)  member start/end joints
    S  (k × 2)  fixities (joint, axis code 1 = X / 2 = Y)
    L  (p × 3)  loads (joint, Fx, Fy)

The truss-level API (michell.solve) only translates a Truss into these
arrays and stores the results back.
"""

from .dof import DOFManager, Axis, DOF_2D_JOINT
from .assemble import assemble_joint_matrix, assemble_load_vector
from .solve import joint_method, IndeterminateError, MechanismError, ConvergenceError

__all__ = [
    'DOFManager',
    'Axis',
    'DOF_2D_JOINT',
    'assemble_joint_matrix',
    'assemble_load_vector',
    'joint_method',
    'IndeterminateError',
    'MechanismError',
    'ConvergenceError',
]

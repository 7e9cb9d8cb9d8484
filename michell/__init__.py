# michell - Discrete Michell truss generation and analysis
"""
MICHELL: Optimum Truss Explorer
===============================

This package provides:
- Generation of discrete Michell trusses (two supports, one point load)
- Method-of-joints analysis (member forces + support reactions)
- Performance index Σ|f|·l (material usage proxy)
- Parameter sweeps over complexity level and support spacing

ARCHITECTURE:
-------------
    graph.py        Directed member graph (TrussGraph)
    model.py        Node and Element geometry
    truss.py        Truss aggregate (nodes + topology + results)
    generative/     Michell geometry/topology generator
    kernel/         Array-level statics (DOF indexing, assembly, solve)
    solve.py        Truss-level solve / analyze
    performance.py  Performance index
    post.py         Equilibrium residuals, member force table
    explore.py      Design sweeps (pandas)
    config.py       Defaults

QUICK START:
------------
    >>> from michell import generate, analyze
    >>> truss = generate(18, 4.0, 40.0)
    >>> analyze(truss)          # solve + score, returns Σ|f|·l
"""

from .config import CONFIG, MichellConfig
from .graph import TrussGraph
from .model import Node, Element
from .truss import Truss, SearchStatus
from .generative import generate, generate_michell, MichellParams
from .kernel import Axis, joint_method, IndeterminateError, MechanismError, ConvergenceError
from .solve import solve, analyze, pinned_supports
from .performance import score

__version__ = "0.1.0"

__all__ = [
    'CONFIG',
    'MichellConfig',
    'TrussGraph',
    'Node',
    'Element',
    'Truss',
    'SearchStatus',
    'generate',
    'generate_michell',
    'MichellParams',
    'Axis',
    'joint_method',
    'IndeterminateError',
    'MechanismError',
    'ConvergenceError',
    'solve',
    'analyze',
    'pinned_supports',
    'score',
]

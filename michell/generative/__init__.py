# michell/generative - Truss geometry generators
"""
GENERATIVE: Michell Truss Generator
===================================

Turns (ne, h, L) into a populated Truss: nodes plus directed member graph.

USAGE:
------
    from michell.generative import generate, MichellParams, generate_michell

    truss = generate(ne=18, h=4.0, L=40.0)
    truss.search.converged      # did the gama search hit L?

    truss = generate_michell(MichellParams(ne=8, h=8.0, L=40.0))
"""

from .michell import (
    MichellParams,
    generate,
    generate_michell,
    build_geometry,
    build_topology,
    stride_count,
)

__all__ = [
    'MichellParams',
    'generate',
    'generate_michell',
    'build_geometry',
    'build_topology',
    'stride_count',
]

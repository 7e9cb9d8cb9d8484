# michell/performance.py
"""
PERFORMANCE INDEX
=================

    δ = Σ |f_i| · l_i / L_c

with f_i the force in member i, l_i its length and L_c a characteristic
length taken as unity. For members sized at a uniform allowable stress,
δ is proportional to material volume, so lower is better.
"""

import logging
from typing import Optional

from .truss import Truss

logger = logging.getLogger(__name__)


def score(truss: Truss) -> Optional[float]:
    """
    Compute and store the performance index of a solved truss.

    Forces must already be on the truss (see michell.solve.solve). When they
    are missing, a warning is logged, the truss is left untouched and None
    is returned.
    """
    if truss.forces is None or len(truss.forces) != truss.num_elements:
        logger.warning("Compute forces first: %r has no member forces to score.", truss)
        return None

    total = 0.0
    for element, force in zip(truss.elements(), truss.forces):
        total += element.length * abs(float(force))

    truss.performance = total
    return total

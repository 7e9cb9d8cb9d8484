# michell/explore.py
"""
EXPLORE: Sweeping Michell Truss Designs
=======================================

PURPOSE:
--------
Generate, solve and score a grid of Michell trusses (complexity level ×
support spacing) and collect the results in a DataFrame.

WORKFLOW:
---------
1. For every (ne, h) pair: generate a fresh truss at load distance L
2. Solve the standard load case (both supports pinned, load on the tip)
3. Score it (Σ|f|·l)
4. Record geometry, search outcome and force metrics

Each combination builds and owns its own Truss, so rows are independent.

A failed analysis (e.g. a degenerate geometry) becomes a row with ok=False
and a reason, so one bad variant does not stop the sweep.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .config import CONFIG
from .generative import generate
from .kernel.solve import IndeterminateError, MechanismError
from .solve import analyze

logger = logging.getLogger(__name__)


@dataclass
class MichellMetrics:
    """
    Metrics of a solved Michell truss.

    performance : float
        Σ|f|·l (lower is better)
    max_tension / max_compression : float
        Largest tensile force and largest compressive magnitude
    total_length : float
        Sum of member lengths
    gama : float
        Accepted free angle (degrees)
    load_distance : float
        Achieved load-point distance Lp
    converged : bool
        Whether the gama search met its tolerance
    n_nodes / n_members : int
    """
    performance: float
    max_tension: float
    max_compression: float
    total_length: float
    gama: float
    load_distance: float
    converged: bool
    n_nodes: int
    n_members: int


def evaluate_michell(
    ne: int,
    h: float,
    L: float = CONFIG.default_L,
    load: float = CONFIG.load,
) -> Tuple[bool, Optional[MichellMetrics], str]:
    """
    Generate, solve and score one design.

    Returns:
    --------
    success : bool
    metrics : Optional[MichellMetrics]
        None if the analysis failed
    reason : str
        Empty on success, otherwise what went wrong
    """
    try:
        truss = generate(ne, h, L)
        performance = analyze(truss, load=load)
    except MechanismError as e:
        return False, None, f"unstable: {e}"
    except IndeterminateError as e:
        return False, None, f"indeterminate: {e}"
    except Exception as e:
        logger.warning("ne=%s h=%s L=%s failed: %s", ne, h, L, e)
        return False, None, f"error: {e}"

    forces = truss.forces
    metrics = MichellMetrics(
        performance=performance,
        max_tension=float(forces.max(initial=0.0)),
        max_compression=float(abs(forces.min(initial=0.0))),
        total_length=float(sum(e.length for e in truss.elements())),
        gama=truss.search.gama,
        load_distance=truss.search.load_distance,
        converged=truss.search.converged,
        n_nodes=truss.num_nodes,
        n_members=truss.num_elements,
    )
    return True, metrics, ""


def run_sweep(
    levels: Sequence[int] = CONFIG.complexity_levels,
    heights: Sequence[float] = CONFIG.support_heights,
    L: float = CONFIG.default_L,
    load: float = CONFIG.load,
    show_progress: bool = False,
) -> pd.DataFrame:
    """
    Evaluate every (ne, h) combination.

    Parameters:
    -----------
    levels : Sequence[int]
        Complexity levels ne (default: 2, 8, 18, ... 98)
    heights : Sequence[float]
        Support spacings h (default: 4, 8, 16)
    L : float
        Target load distance, shared by all designs
    load : float
        Vertical point load
    show_progress : bool
        Show a tqdm progress bar

    Returns:
    --------
    pd.DataFrame
        One row per combination: ne, h, L, ok, reason and all MichellMetrics
        fields (NaN where the analysis failed)
    """
    combos = [(ne, h) for h in heights for ne in levels]
    iterator = tqdm(combos, desc="Evaluating") if show_progress else combos

    metric_fields = list(MichellMetrics.__dataclass_fields__)
    results = []
    for ne, h in iterator:
        success, metrics, reason = evaluate_michell(ne, h, L, load)
        row = {'ne': ne, 'h': h, 'L': L, 'ok': success, 'reason': reason}
        if success and metrics:
            row.update(asdict(metrics))
        else:
            row.update({name: np.nan for name in metric_fields})
        results.append(row)

    df = pd.DataFrame(results)
    logger.info("Sweep finished: %d designs, %d solved", len(df), int(df['ok'].sum()) if len(df) else 0)
    return df

# michell/generative/michell.py
"""
MICHELL GENERATOR: Discrete Optimum Trusses
===========================================

PURPOSE:
--------
Generate the simple symmetric form of a discrete Michell truss: two fixed
supports on the same vertical line (x = 0, y = ±h/2) and a vertical point
load on the symmetry axis at distance L.

GEOMETRY:
---------
The layout follows the geometric construction of Mazurek, Baker & Tort,
"Geometrical aspects of optimum truss like structures" (SMO 43(2), 2011).
A single free angle gama fixes two derived angles:

    kapa  = 90° - gama
    lamda = 90° - gama/2

The truss is built in na = floor(sqrt(ne/2)) strides. Each stride:
1. Drops a line from the previous stride's first node, at slope
   tan(90° + lamda), down to the symmetry axis. The hit point Lp becomes
   the stride's axis node.
2. Fans out (count - 1) nodes from that axis node. Each step moves by
   mm = sqrt(side² + Lp²) · tan(kapa) at bearing atan(|-1/lm|), and the
   step folds back in x when the bearing decreases. Every node is
   mirrored about the axis.

The last axis node is the load point.

SEARCH:
-------
No closed form gives the gama that places the load point at L, so the
generator steps gama linearly (89°/300 per attempt, 300 attempts) and
accepts the first geometry with Lp - L < eps. If nothing is accepted, the
last attempt is returned and truss.search.converged is False.

INDEXING:
---------
    0, 1                 supports (upper, lower)
    per stride:          axis node, then (upper, lower) pairs
    N - 1                load node (last axis node)

For every generated truss 2·N = M + 4, so it is determinate with the two
supports pinned in both directions.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..config import CONFIG, MichellConfig
from ..graph import TrussGraph
from ..kernel.solve import ConvergenceError
from ..model import Node
from ..truss import SearchStatus, Truss

logger = logging.getLogger(__name__)


@dataclass
class MichellParams:
    """
    Parameters defining a Michell truss.

    ne : int
        Complexity level: number of members at the finest resolution.
        Even and >= 0. The levels 2, 8, 18, 32, ... (2·k²) give k strides.
    h : float
        Distance between the two supports.
    L : float
        Target distance of the load point from the support line.
    strict : bool
        Raise ConvergenceError instead of accepting a non-converged search.
    """
    ne: int = CONFIG.default_ne
    h: float = CONFIG.default_h
    L: float = CONFIG.default_L
    strict: bool = False


def stride_count(ne: int) -> int:
    """Number of strides na = floor(sqrt(ne / 2))."""
    return math.isqrt(ne // 2)


def _validate(ne: int, h: float, L: float) -> None:
    if isinstance(ne, bool) or not isinstance(ne, (int, np.integer)):
        raise ValueError(f"ne must be an integer, got {ne!r}")
    if ne < 0 or ne % 2:
        raise ValueError(f"ne must be a non-negative even integer, got {ne}")
    if not h > 0:
        raise ValueError(f"Support spacing h must be positive, got {h}")
    if not L > 0:
        raise ValueError(f"Load distance L must be positive, got {L}")


def _tan_deg(angle: float) -> float:
    return float(np.tan(np.radians(angle)))


def _fan_stride(axis_node: Node, n_steps: int, lamda: float, kapa: float, eps: float) -> List[Node]:
    """Upper nodes of one stride, stepping out from its axis node."""
    upper = []
    previous = axis_node
    reach = axis_node.x
    side = axis_node.y
    previous_bearing = 0.0
    angle = lamda
    lm = _tan_deg(90.0 + angle)

    for _ in range(n_steps):
        thetam = float(np.arctan(abs(-1.0 / (lm + eps))))
        bearing = float(np.degrees(thetam))
        bm = float(np.sqrt(side * side + reach * reach))
        mm = bm * _tan_deg(kapa)

        dx = mm * float(np.cos(thetam))
        if bearing < previous_bearing:
            # folds back towards the supports
            x = previous.x - dx
        else:
            x = previous.x + dx
        y = previous.y + mm * float(np.sin(thetam))

        node = Node(x, y)
        upper.append(node)

        angle += kapa
        lm = _tan_deg(90.0 + angle)
        previous_bearing = bearing
        reach = mm
        side = bm
        previous = node

    return upper


def build_geometry(na: int, h: float, gama: float, eps: float = CONFIG.eps) -> Tuple[List[Node], float]:
    """
    Node list for a given stride count and free angle gama (degrees).

    Returns:
    --------
    nodes : List[Node]
        Supports, then per stride the axis node and mirrored pairs
    Lp : float
        x of the last axis node (the load point); eps when na == 0
    """
    kapa = 90.0 - gama
    lamda = 90.0 - gama / 2.0

    support = Node(0.0, h / 2.0)
    nodes = [support, Node(0.0, -h / 2.0)]

    Lp = eps
    previous = support
    for count in range(na, 0, -1):
        lm = _tan_deg(90.0 + lamda)
        Lp = previous.x - previous.y / (lm + eps)
        axis_node = Node(Lp, 0.0)
        nodes.append(axis_node)
        previous = axis_node

        if count > 1:
            upper = _fan_stride(axis_node, count - 1, lamda, kapa, eps)
            for node in upper:
                nodes.append(node)
                nodes.append(Node(node.x, -node.y))
            previous = upper[0]

    return nodes, Lp


def _link_stride(
    graph: TrussGraph,
    upper: List[int],
    lower: List[int],
    last: int,
    offset: int,
    n_steps: int,
) -> Tuple[List[int], List[int], int]:
    """
    Wire one stride into the graph.

    upper/lower are the previous stride's node ids (supports 0 and 1 for the
    first stride). Returns this stride's upper ids, lower ids and the last
    id used.
    """
    axis = last + 1
    graph.add_edge(upper[0], axis)
    graph.add_edge(lower[0], axis)

    next_upper, next_lower = [], []
    current = axis
    for i in range(n_steps):
        current += 1
        parent = upper[i] + offset if i < len(upper) else 0
        graph.add_edge(parent, current)
        graph.add_edge(current - (1 if i == 0 else 2), current)
        next_upper.append(current)

        current += 1
        parent = lower[i] + offset if i < len(lower) else 1
        graph.add_edge(parent, current)
        graph.add_edge(current - 2, current)
        next_lower.append(current)

    return next_upper, next_lower, current


def build_topology(na: int) -> TrussGraph:
    """Member graph for na strides. Depends only on na, not on gama."""
    graph = TrussGraph(2 + na * na)
    upper, lower = [0], [1]
    last = 1
    for count in range(na, 0, -1):
        offset = 0 if count == na else 2
        upper, lower, last = _link_stride(graph, upper, lower, last, offset, count - 1)
    return graph


def _base_truss(h: float, L: float) -> Truss:
    nodes = [Node(0.0, h / 2.0), Node(0.0, -h / 2.0), Node(L, 0.0)]
    graph = TrussGraph(3)
    graph.add_edge(0, 2)
    graph.add_edge(1, 2)
    gama = math.degrees(2.0 * math.atan((h / 2.0) / L))
    status = SearchStatus(converged=True, attempts=0, gama=gama, load_distance=L, target=L)
    return Truss(nodes, graph, search=status)


def generate(
    ne: int,
    h: float,
    L: float,
    *,
    strict: bool = False,
    config: MichellConfig = CONFIG,
) -> Truss:
    """
    Generate a Michell truss (geometry + topology).

    Parameters:
    -----------
    ne : int
        Complexity level (even, >= 0)
    h : float
        Support spacing (supports at y = ±h/2)
    L : float
        Target load-point distance
    strict : bool
        If True, raise ConvergenceError when the gama search fails
    config : MichellConfig
        Search constants (attempts, span, eps)

    Returns:
    --------
    Truss
        Fresh, unsolved truss. truss.search reports the search outcome.

    Raises:
    -------
    ValueError
        Invalid ne, h or L
    ConvergenceError
        Only with strict=True, if no attempt reached the target

    Example:
    --------
    >>> truss = generate(8, 4.0, 40.0)
    >>> truss.num_nodes, truss.num_elements
    (6, 8)
    """
    _validate(ne, h, L)

    if ne == 2:
        return _base_truss(h, L)

    na = stride_count(ne)
    step = config.search_step
    gama = step
    nodes, Lp = [], config.eps
    status = None

    for attempt in range(config.search_attempts):
        nodes, Lp = build_geometry(na, h, gama, config.eps)
        if Lp - L < config.eps:
            status = SearchStatus(converged=True, attempts=attempt, gama=gama, load_distance=Lp, target=L)
            logger.info("Michell ne=%d h=%g L=%g: gama=%.4f deg after %d attempts (Lp=%.6g)",
                        ne, h, L, gama, attempt, Lp)
            break
        logger.debug("attempt %d: gama=%.4f deg, Lp=%.6g", attempt, gama, Lp)
        gama += step

    if status is None:
        last_gama = gama - step
        status = SearchStatus(
            converged=False,
            attempts=config.search_attempts,
            gama=last_gama,
            load_distance=Lp,
            target=L,
        )
        if strict:
            raise ConvergenceError(
                f"gama search did not reach L={L} after {config.search_attempts} attempts "
                f"(last Lp={Lp:.6g} at gama={last_gama:.4f} deg)"
            )
        logger.warning("gama search did not converge for ne=%d h=%g L=%g; keeping last attempt "
                       "(Lp=%.6g, gama=%.4f deg)", ne, h, L, Lp, last_gama)

    return Truss(nodes, build_topology(na), search=status)


def generate_michell(params: MichellParams) -> Truss:
    """Dataclass entry point, equivalent to generate(params.ne, params.h, params.L)."""
    return generate(params.ne, params.h, params.L, strict=params.strict)

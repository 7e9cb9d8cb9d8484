#!/usr/bin/env python3
"""
RUN_MICHELL: Generate, Solve and Score Michell Trusses
======================================================

This demo walks through the full pipeline:
1. Generate a Michell truss for (ne, h, L)
2. Solve member forces with the method of joints
3. Print the member table and the performance index
4. Sweep all complexity levels and support spacings

Run with:
    python demos/run_michell.py
    python demos/run_michell.py --ne 32 --h 8
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from michell import CONFIG, generate, analyze, pinned_supports
from michell.explore import run_sweep
from michell.post import joint_residuals, member_table


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def main():
    parser = argparse.ArgumentParser(description="Michell truss explorer")
    parser.add_argument("--ne", type=int, default=18, help="complexity level (2, 8, 18, ...)")
    parser.add_argument("--h", type=float, default=CONFIG.default_h, help="support spacing")
    parser.add_argument("--L", type=float, default=CONFIG.default_L, help="load distance")
    parser.add_argument("--load", type=float, default=CONFIG.load, help="vertical point load")
    parser.add_argument("--no-sweep", action="store_true", help="skip the parameter sweep")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print_header(f"MICHELL TRUSS  ne={args.ne}  h={args.h:g}  L={args.L:g}")
    truss = generate(args.ne, args.h, args.L)
    search = truss.search
    print(f"Nodes: {truss.num_nodes}   Members: {truss.num_elements}")
    print(f"gama = {search.gama:.3f} deg   Lp = {search.load_distance:.4f}   "
          f"converged = {search.converged} ({search.attempts} attempts)")

    performance = analyze(truss, load=args.load)

    print_header("MEMBER FORCES")
    print(member_table(truss).to_string(index=False, float_format=lambda v: f"{v:10.3f}"))
    print(f"\nReactions: {np.round(truss.reactions, 3)}")
    print(f"Performance Σ|f|·l = {performance:.1f}")

    residual = joint_residuals(
        truss, pinned_supports(0, 1), [(truss.num_nodes - 1, 0.0, args.load)]
    )
    print(f"Max joint residual: {np.abs(residual).max():.2e}")

    if not args.no_sweep:
        print_header("SWEEP")
        df = run_sweep(L=args.L, load=args.load, show_progress=True)
        print(df[['ne', 'h', 'ok', 'n_members', 'gama', 'load_distance', 'performance']].to_string(index=False))


if __name__ == "__main__":
    main()

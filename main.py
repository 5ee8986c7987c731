#!/usr/bin/env python3
"""
spinelab: Spines of Simplicial Complexes

Reduces simplicial complexes by elementary collapses.

Usage:
    # Compute the spine of a complex stored as JSON
    python main.py spine --input complex.json --output spine.json

    # Cross-check against the naive reference reducer
    python main.py spine --input complex.json --naive

    # Run demos
    python main.py demo --example triangle

    # Run tests
    python main.py test
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from spinelab import (
    SimplicialComplex,
    betti_numbers,
    build_vietoris_rips_complex,
    compute_spine,
    euler_characteristic,
    __version__,
)
from spinelab.api.serialization import load_complex_from_json, save_complex_to_json


def describe_complex(name: str, K: SimplicialComplex) -> None:
    """Print size, per-dimension counts and Betti numbers of a complex."""
    print(f"  {name}: {len(K)} simplices, dimension {K.dimension()}")
    print(f"    simplices per dimension: {K.count_by_dimension()}")
    print(f"    Euler characteristic:    {euler_characteristic(K)}")
    print(f"    Betti numbers (Z/2):     {betti_numbers(K)}")


def cmd_spine(args):
    """Execute the spine command."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print(f"Loading complex from: {args.input}")
    try:
        K, registry = load_complex_from_json(args.input)
    except (OSError, ValueError, KeyError) as e:
        print(f"Error reading {args.input}: {e}")
        return 1

    print("\nInput:")
    describe_complex("K", K)

    print("\nComputing spine...")
    try:
        result = compute_spine(K, max_steps=args.max_steps, check_invariants=args.check)
    except Exception as e:
        print(f"Error during reduction: {e}")
        import traceback
        traceback.print_exc()
        return 1

    print(f"\nResults:")
    print(f"  Collapses: {result.collapses}")
    print(f"  Rebuilds:  {result.rebuilds}")
    print(f"  Status:    {'complete' if result.complete else 'step budget exhausted'}")
    describe_complex("spine", result.spine)

    status = 0
    if args.naive:
        print("\nRunning naive reference reducer...")
        reference = compute_spine(K, method="naive")
        match = reference.spine == result.spine
        print(f"  Naive spine size: {len(reference.spine)}")
        print(f"  Identical: {match}")
        if not match and result.complete:
            status = 1

    if args.output:
        extra = {
            "input_size": result.input_size,
            "collapses": result.collapses,
            "complete": result.complete,
        }
        save_complex_to_json(args.output, result.spine, registry, extra=extra)
        print(f"\nSpine saved to: {args.output}")

    return status


def full_simplex(n: int) -> SimplicialComplex:
    """All non-empty subsets of {0, ..., n-1}."""
    simplices = []
    for mask in range(1, 2 ** n):
        simplices.append(tuple(i for i in range(n) if mask & (1 << i)))
    return SimplicialComplex(simplices)


def demo_triangle():
    """Demo: filled triangle collapses to a point."""
    print("=" * 60)
    print("Demo: Filled triangle")
    print("=" * 60)

    K = full_simplex(3)
    describe_complex("K", K)

    incremental = compute_spine(K)
    naive = compute_spine(K, method="naive")
    describe_complex("spine", incremental.spine)

    print(f"\nSpine (incremental) = {incremental.spine.to_list()}")
    print(f"Spine (naive)       = {naive.spine.to_list()}")
    return len(incremental.spine) == 1 and len(naive.spine) == 1


def demo_hollow():
    """Demo: hollow triangle and hollow tetrahedron are already spines."""
    print("=" * 60)
    print("Demo: Hollow triangle and hollow tetrahedron")
    print("=" * 60)

    cycle = SimplicialComplex([(0, 1), (0, 2), (1, 2), (0,), (1,), (2,)])
    sphere = SimplicialComplex(s for s in full_simplex(4) if len(s) < 4)

    passed = True
    for name, K in (("cycle", cycle), ("sphere", sphere)):
        result = compute_spine(K)
        describe_complex(name, result.spine)
        passed = passed and len(result.spine) == len(K)
    return passed


def demo_circles():
    """Demo: Vietoris-Rips complex of two touching circles (S^1 v S^1)."""
    print("=" * 60)
    print("Demo: Two touching circles")
    print("=" * 60)

    n = 50
    theta = 2 * np.pi / n * np.arange(n)
    left = np.column_stack([np.cos(theta), np.sin(theta)])
    right = left + np.array([2.0, 0.0])
    points = np.vstack([left, right])

    K = build_vietoris_rips_complex(points, epsilon=0.3, max_dimension=2)
    describe_complex("K", K)

    result = compute_spine(K)
    describe_complex("spine", result.spine)
    print(f"\nCollapses: {result.collapses}, rebuilds: {result.rebuilds}")

    return betti_numbers(K) == betti_numbers(result.spine)


DEMOS = {
    "triangle": demo_triangle,
    "hollow": demo_hollow,
    "circles": demo_circles,
}


def cmd_demo(args):
    """Execute the demo command."""
    names = list(DEMOS) if args.example == "all" else [args.example]

    failed = []
    for name in names:
        if not DEMOS[name]():
            failed.append(name)
        print()

    if len(names) > 1:
        print(f"{len(names) - len(failed)}/{len(names)} demos passed")
    for name in failed:
        print(f"  FAILED: {name}")
    return 1 if failed else 0


def cmd_test(args):
    """Execute the test command."""
    import subprocess

    root = Path(__file__).parent
    cmd = [sys.executable, "-m", "pytest", str(root / "tests")]
    if args.verbose:
        cmd.append("-v")
    if args.coverage:
        cmd += ["--cov=spinelab", "--cov-report=term-missing"]

    print("Running:", " ".join(cmd))
    return subprocess.run(cmd, cwd=root).returncode


def cmd_info(args):
    """Display version and dependency information."""
    import networkx
    import scipy

    print(f"spinelab v{__version__}")
    print("Methods: incremental (coface index, local re-probe), naive (reference)")
    for name, version in (
        ("Python", sys.version.split()[0]),
        ("NumPy", np.__version__),
        ("SciPy", scipy.__version__),
        ("NetworkX", networkx.__version__),
    ):
        print(f"  {name:<9} {version}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spinelab",
        description="Spines of simplicial complexes by elementary collapse",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  spinelab spine --input complex.json --output spine.json
  spinelab spine --input complex.json --naive --check
  spinelab demo --example circles
  spinelab test -v
"""
    )
    parser.add_argument("--version", "-V", action="version", version=f"spinelab {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("spine", help="Compute the spine of a complex")
    p.add_argument("--input", "-i", type=str, required=True, help="Input JSON file")
    p.add_argument("--output", "-o", type=str, help="Output JSON file")
    p.add_argument("--naive", "-n", action="store_true", help="Compare with the naive reference reducer")
    p.add_argument("--check", "-c", action="store_true", help="Verify engine invariants after every collapse")
    p.add_argument("--max-steps", type=int, default=None, help="Stop after this many collapses")
    p.add_argument("--verbose", "-v", action="store_true", help="Log every collapse")
    p.set_defaults(func=cmd_spine)

    p = subparsers.add_parser("demo", help="Run demonstration examples")
    p.add_argument("--example", "-e", choices=sorted(DEMOS) + ["all"], default="all")
    p.set_defaults(func=cmd_demo)

    p = subparsers.add_parser("test", help="Run the test suite")
    p.add_argument("--verbose", "-v", action="store_true")
    p.add_argument("--coverage", "-c", action="store_true")
    p.set_defaults(func=cmd_test)

    p = subparsers.add_parser("info", help="Show version information")
    p.set_defaults(func=cmd_info)
    return parser


def main():
    parser = build_parser()
    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

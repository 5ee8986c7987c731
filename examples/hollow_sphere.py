"""
Example: Hollow tetrahedron with a flap.

The boundary of a tetrahedron is a 2-sphere. Every edge is shared by two
triangles, so no triangle has a free face and the sphere survives. A
triangle glued to it at one vertex collapses away.
"""

from itertools import combinations

from spinelab import SimplicialComplex, betti_numbers, closure, compute_spine


def main():
    sphere = [c for k in (1, 2, 3) for c in combinations(range(4), k)]
    flap = list(closure([(3, 4, 5)]))
    K = SimplicialComplex(sphere + flap)

    print(f"Complex: {len(K)} simplices, per dimension {K.count_by_dimension()}")
    print(f"Betti numbers: {betti_numbers(K)}")

    result = compute_spine(K, check_invariants=True)

    print(f"\nSpine: {len(result.spine)} simplices, per dimension {result.spine.count_by_dimension()}")
    print(f"Betti numbers: {betti_numbers(result.spine)}")
    print(f"Collapses: {result.collapses}, rebuilds: {result.rebuilds}")


if __name__ == "__main__":
    main()

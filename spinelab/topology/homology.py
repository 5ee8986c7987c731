"""
spinelab/topology/homology.py

Simplicial homology over Z/2.

Betti numbers are homotopy invariants, so they give an independent check
that a spine has the topology of the complex it was computed from:

    b_k = n_k - rank(d_k) - rank(d_{k+1})

where n_k is the number of k-simplices and d_k the boundary map from
k-chains to (k-1)-chains.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex


def boundary_matrix(K: SimplicialComplex, dim: int) -> np.ndarray:
    """
    Z/2 boundary matrix of the map from dim-chains to (dim-1)-chains.

    Rows follow the enumeration order of the (dim-1)-simplices, columns the
    order of the dim-simplices.
    """
    cols = list(K.range(dim))
    rows = list(K.range(dim - 1)) if dim > 0 else []
    row_index: Dict[Simplex, int] = {s: i for i, s in enumerate(rows)}

    M = np.zeros((len(rows), len(cols)), dtype=np.uint8)
    if dim == 0:
        return M
    for j, s in enumerate(cols):
        for f in s.boundary():
            M[row_index[f], j] = 1
    return M


def rank_mod2(M: np.ndarray) -> int:
    """Rank of a 0/1 matrix over Z/2 by Gaussian elimination."""
    A = (np.asarray(M, dtype=np.uint8) & 1).copy()
    n_rows, n_cols = A.shape
    rank = 0
    for c in range(n_cols):
        if rank == n_rows:
            break
        pivots = np.nonzero(A[rank:, c])[0]
        if pivots.size == 0:
            continue
        p = rank + int(pivots[0])
        if p != rank:
            A[[rank, p]] = A[[p, rank]]
        # Eliminate column c from every other row
        others = np.nonzero(A[:, c])[0]
        others = others[others != rank]
        if others.size:
            A[others] ^= A[rank]
        rank += 1
    return rank


def betti_numbers(K: SimplicialComplex) -> List[int]:
    """
    Z/2 Betti numbers b_0, ..., b_d of K, where d = dim(K).

    Returns an empty list for the empty complex.
    """
    top = K.dimension()
    counts = K.count_by_dimension()
    ranks = [0] * (top + 2)
    for d in range(1, top + 1):
        ranks[d] = rank_mod2(boundary_matrix(K, d))
    return [counts[d] - ranks[d] - ranks[d + 1] for d in range(top + 1)]


def euler_characteristic(K: SimplicialComplex) -> int:
    """Alternating sum of simplex counts."""
    return sum((-1) ** d * n for d, n in enumerate(K.count_by_dimension()))

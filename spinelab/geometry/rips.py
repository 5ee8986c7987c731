"""
spinelab/geometry/rips.py

Vietoris-Rips complexes.

The Vietoris-Rips complex at scale epsilon has:
- Vertices: points
- Edges: pairs at distance <= epsilon
- Higher simplices: cliques of the neighbourhood graph (flag expansion)

Each simplex carries the length of its longest edge as data, so the
complex can be enumerated in filtration order.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable

import networkx as nx
import numpy as np
from scipy.spatial import cKDTree

from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex


def neighbourhood_graph(points: np.ndarray, epsilon: float) -> nx.Graph:
    """
    Build the epsilon-neighbourhood graph of a point cloud.

    Args:
        points: (n, d) array of coordinates
        epsilon: Distance threshold

    Returns:
        NetworkX graph with:
        - Nodes: point indices 0..n-1
        - Edges: pairs with distance <= epsilon
        - Edge attrs: weight (Euclidean distance)
    """
    X = np.asarray(points, dtype=np.float64)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise ValueError(f"points must be a 2D array, got shape {X.shape}")
    if epsilon < 0:
        raise ValueError(f"epsilon must be non-negative, got {epsilon}")

    g = nx.Graph()
    g.add_nodes_from(range(X.shape[0]))

    tree = cKDTree(X)
    pairs = tree.query_pairs(r=epsilon, output_type="ndarray")
    for i, j in pairs:
        w = float(np.linalg.norm(X[i] - X[j]))
        g.add_edge(int(i), int(j), weight=w)
    return g


def graph_from_complex(K: SimplicialComplex) -> nx.Graph:
    """1-skeleton of K as a graph; edge weights are the edge data values."""
    g = nx.Graph()
    for s in K.range(0):
        g.add_node(s.vertices[0])
    for s in K.range(1):
        u, v = s.vertices
        g.add_edge(u, v, weight=float(s.data))
    return g


def rips_expansion(g: nx.Graph, max_dimension: int) -> SimplicialComplex:
    """
    Flag expansion of a weighted graph up to a maximum dimension.

    Args:
        g: Graph whose edges carry a "weight" attribute (default 0.0)
        max_dimension: Largest simplex dimension to include

    Returns:
        SimplicialComplex in data filtration order
    """
    if max_dimension < 0:
        raise ValueError(f"max_dimension must be non-negative, got {max_dimension}")

    simplices = [Simplex((v,), 0.0) for v in g.nodes()]
    if max_dimension >= 1:
        # Cliques are generated in order of increasing size
        for clique in nx.enumerate_all_cliques(g):
            if len(clique) < 2:
                continue
            if len(clique) > max_dimension + 1:
                break
            data = max(g[u][v].get("weight", 0.0) for u, v in combinations(clique, 2))
            simplices.append(Simplex(tuple(clique), data))
    return SimplicialComplex(simplices, filtration="data")


def build_vietoris_rips_complex(
    points: Iterable,
    epsilon: float,
    max_dimension: int = 2,
) -> SimplicialComplex:
    """
    Vietoris-Rips complex of a point cloud.

    Args:
        points: (n, d) array-like of coordinates
        epsilon: Distance threshold for edges
        max_dimension: Largest simplex dimension to include

    Returns:
        SimplicialComplex whose simplices carry their diameter as data
    """
    g = neighbourhood_graph(np.asarray(points, dtype=np.float64), epsilon)
    return rips_expansion(g, max_dimension)

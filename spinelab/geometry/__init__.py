"""
Geometry module: Vietoris-Rips complexes of point clouds.
"""

from spinelab.geometry.rips import build_vietoris_rips_complex, graph_from_complex, neighbourhood_graph, rips_expansion

__all__ = [
    "build_vietoris_rips_complex",
    "graph_from_complex",
    "neighbourhood_graph",
    "rips_expansion",
]

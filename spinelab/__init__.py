"""
spinelab: Spines of Simplicial Complexes

Reduces a simplicial complex by iterated elementary collapses to its spine,
a smaller complex with the same homotopy type.

Key components:
- topology: Simplex and complex containers, coface index, Z/2 homology
- reduction: Admissible pairs, incremental collapse engine, naive reference
- geometry: Vietoris-Rips complexes of point clouds
- core: Error types and vertex registry
- api: JSON serialization
"""

__version__ = "1.0.0"
__author__ = "spinelab Team"

from spinelab.core.errors import InvariantViolation
from spinelab.topology.simplex import Simplex
from spinelab.topology.complex import SimplicialComplex, closure
from spinelab.topology.cofaces import CofaceIndex
from spinelab.topology.homology import betti_numbers, euler_characteristic
from spinelab.geometry.rips import build_vietoris_rips_complex
from spinelab.solver import spine, naive_spine, compute_spine, SpineResult

__all__ = [
    # Errors
    "InvariantViolation",
    # Topology
    "Simplex",
    "SimplicialComplex",
    "closure",
    "CofaceIndex",
    "betti_numbers",
    "euler_characteristic",
    # Geometry
    "build_vietoris_rips_complex",
    # Spine
    "spine",
    "naive_spine",
    "compute_spine",
    "SpineResult",
]

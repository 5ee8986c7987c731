"""
Topology module: simplices, complexes, coface index, and homology.
"""

from spinelab.topology.simplex import Simplex
from spinelab.topology.complex import SimplicialComplex, closure
from spinelab.topology.cofaces import CofaceIndex
from spinelab.topology.homology import betti_numbers, euler_characteristic

__all__ = [
    "Simplex",
    "SimplicialComplex",
    "closure",
    "CofaceIndex",
    "betti_numbers",
    "euler_characteristic",
]

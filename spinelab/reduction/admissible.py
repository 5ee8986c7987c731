"""
spinelab/reduction/admissible.py

Admissible pair discovery.

An admissible pair (sigma, tau) consists of a principal simplex sigma and a
free face tau of sigma, i.e. cofaces[tau] == {sigma}. Collapsing the pair
removes both simplices without changing the homotopy type.

The admissible set is a dict sigma -> tau. Rebuilds fill it in enumeration
order; the collapse engine picks pairs by enumeration position.
"""

from __future__ import annotations

from typing import Dict

from spinelab.topology.cofaces import CofaceIndex
from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex

AdmissibleMap = Dict[Simplex, Simplex]


def rebuild(cofaces: CofaceIndex, K: SimplicialComplex) -> AdmissibleMap:
    """
    Full scan for admissible pairs.

    Args:
        cofaces: Coface index in sync with K
        K: Current complex

    Returns:
        Map from principal simplex to its first free face, in enumeration order
    """
    admissible: AdmissibleMap = {}
    for s in K:
        tau = cofaces.free_face(s)
        if tau is not None:
            admissible[s] = tau
    return admissible


def probe(cofaces: CofaceIndex, s: Simplex, admissible: AdmissibleMap) -> bool:
    """
    Targeted re-check of a single simplex.

    Records (s, first free face) if s is admissible, overwriting an older
    entry whose free face may have changed. A simplex that is no longer
    admissible is dropped from the set.

    Returns:
        True if s was not a key of the admissible set before
    """
    tau = cofaces.free_face(s)
    if tau is None:
        admissible.pop(s, None)
        return False
    added = s not in admissible
    admissible[s] = tau
    return added

"""
spinelab/reduction/naive.py

Reference spine computation without any bookkeeping.

Every iteration recomputes principality and free faces by scanning the
whole complex. This is slow (quadratic per iteration) and only meant as an
oracle for the incremental engine.
"""

from __future__ import annotations

from typing import Dict, Optional

from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex


def is_principal(s: Simplex, K: SimplicialComplex) -> bool:
    """
    True if s is not a face of any simplex one dimension up.

    Vertices are never considered principal since they have no faces to
    collapse with. K is assumed closed, so checking one dimension up
    suffices.
    """
    if s.dimension() == 0:
        return False
    for t in K.range(s.dimension() + 1):
        if s.is_face_of(t):
            return False
    return True


def free_face(s: Simplex, K: SimplicialComplex) -> Optional[Simplex]:
    """First face of a principal s that no other simplex of its dimension contains."""
    if not is_principal(s, K):
        return None

    peers = [t for t in K.range(s.dimension()) if t != s]
    for face in s.boundary():
        if not any(face.is_face_of(t) for t in peers):
            return face
    return None


def principal_faces(K: SimplicialComplex) -> Dict[Simplex, Simplex]:
    """All admissible pairs of K, principal simplex -> free face."""
    out: Dict[Simplex, Simplex] = {}
    for s in K:
        tau = free_face(s, K)
        if tau is not None:
            out[s] = tau
    return out


def naive_spine(K: SimplicialComplex) -> SimplicialComplex:
    """
    Spine of K, recomputing the admissible pairs after every collapse.

    Args:
        K: Face-closed simplicial complex (not modified)

    Returns:
        New complex with no admissible pairs
    """
    L = K.copy()
    admissible = principal_faces(L)
    while admissible:
        sigma, tau = next(iter(admissible.items()))
        L.remove_without_validation(sigma)
        L.remove_without_validation(tau)
        admissible = principal_faces(L)
    return L

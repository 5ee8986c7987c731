"""
spinelab/topology/cofaces.py

Coface index of a simplicial complex.

The index maps every simplex s to the set of simplices having s as an
immediate face:
- cofaces[s] is empty iff s is principal
- for every live simplex, cofaces[s] equals exactly the current members
  having s as an immediate face

Entries are keyed by vertex-set identity; the complex owns the simplices.
The index is kept in sync with elementary collapses via `collapse()`.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Set

from spinelab.core.errors import InvariantViolation
from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex


class CofaceIndex:
    """
    Incrementally maintained coface relation.

    Build once per reduction with `CofaceIndex.build(K)`, then update with
    `collapse(sigma, tau)` after every elementary collapse.
    """

    def __init__(self):
        self._cofaces: Dict[Simplex, Set[Simplex]] = {}

    @classmethod
    def build(cls, K: SimplicialComplex) -> "CofaceIndex":
        """
        Build the coface index of K in one pass over K and its boundaries.

        Every simplex gets an entry, possibly empty, so that later lookups
        never have to distinguish "no cofaces" from "unknown simplex".
        """
        index = cls()
        cofaces = index._cofaces
        for s in K:
            cofaces.setdefault(s, set())
            for f in s.boundary():
                cofaces.setdefault(f, set()).add(s)
        return index

    def cofaces_of(self, s: Simplex) -> Set[Simplex]:
        """Immediate cofaces of s. Raises if s has no entry."""
        try:
            return self._cofaces[s]
        except KeyError:
            raise InvariantViolation(
                f"No coface entry for {list(s.vertices)}: simplex is not part of the complex"
            ) from None

    def is_principal(self, s: Simplex) -> bool:
        """True if s is not a proper face of any live simplex."""
        return not self.cofaces_of(s)

    def free_face(self, s: Simplex) -> Optional[Simplex]:
        """
        First free face of a principal simplex.

        Scans the boundary of s in its fixed order and returns the first face
        whose only coface is s. Returns None if s is not principal or has no
        free face.
        """
        if not self.is_principal(s):
            return None

        for f in s.boundary():
            cof = self.cofaces_of(f)
            if len(cof) == 1 and s in cof:
                return f
        return None

    def collapse(self, sigma: Simplex, tau: Simplex) -> None:
        """
        Update the index for the elementary collapse of (sigma, tau).

        sigma is removed from the cofaces of its faces, tau from the cofaces
        of its faces, and both entries are dropped.
        """
        if not self.is_principal(sigma):
            raise InvariantViolation(f"{list(sigma.vertices)} is not principal")
        if not (tau.dimension() == sigma.dimension() - 1 and tau.is_face_of(sigma)):
            raise InvariantViolation(
                f"{list(tau.vertices)} is not an immediate face of {list(sigma.vertices)}"
            )
        if self.cofaces_of(tau) != {sigma}:
            raise InvariantViolation(
                f"{list(tau.vertices)} is not a free face of {list(sigma.vertices)}"
            )

        for f in sigma.boundary():
            self.cofaces_of(f).discard(sigma)
        for g in tau.boundary():
            self.cofaces_of(g).discard(tau)

        del self._cofaces[sigma]
        del self._cofaces[tau]

    def as_dict(self) -> Dict[Simplex, frozenset]:
        """Snapshot of the index."""
        return {s: frozenset(cof) for s, cof in self._cofaces.items()}

    def consistent_with(self, K: SimplicialComplex) -> bool:
        """True if the index equals the coface relation recomputed from K."""
        return self.as_dict() == CofaceIndex.build(K).as_dict()

    def __contains__(self, s: object) -> bool:
        return s in self._cofaces

    def __iter__(self) -> Iterator[Simplex]:
        return iter(self._cofaces)

    def __len__(self) -> int:
        return len(self._cofaces)

    def __repr__(self) -> str:
        principal = sum(1 for cof in self._cofaces.values() if not cof)
        return f"CofaceIndex(entries={len(self._cofaces)}, principal={principal})"

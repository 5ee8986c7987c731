"""
spinelab/topology/complex.py

Simplicial complex container.

The complex stores its simplices in a deterministic enumeration order in
which faces never succeed their cofaces. Simplices are keyed by their vertex
set, so a face produced by `Simplex.boundary()` looks up the stored member
together with its data payload.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from spinelab.core.errors import InvariantViolation
from spinelab.topology.simplex import Simplex, Vertex

SimplexLike = Any  # Simplex or an iterable of vertices


def _dimension_key(s: Simplex) -> Tuple:
    return (s.dimension(), s.vertices)


def _data_key(s: Simplex) -> Tuple:
    return (s.data, s.dimension(), s.vertices)


FILTRATIONS: Dict[str, Callable[[Simplex], Tuple]] = {
    "dimension": _dimension_key,
    "data": _data_key,
}


def as_simplex(s: SimplexLike) -> Simplex:
    """Coerce a vertex collection to a Simplex."""
    if isinstance(s, Simplex):
        return s
    return Simplex(tuple(s))


class SimplicialComplex:
    """
    Simplicial complex with a fixed enumeration order.

    On construction the simplices are stably sorted by the chosen filtration:
    - "dimension": by (dimension, vertices)
    - "data": by (data, dimension, vertices); faces must not carry larger
      data values than their cofaces for this order to be face-first

    Duplicate vertex sets keep their first occurrence.
    """

    def __init__(self, simplices: Iterable[SimplexLike] = (), filtration: str = "dimension"):
        if filtration not in FILTRATIONS:
            raise ValueError(f"Unknown filtration: {filtration}")
        self.filtration = filtration
        self._simplices: Dict[Simplex, Simplex] = {}
        self._order: Optional[List[Simplex]] = None

        items = [as_simplex(s) for s in simplices]
        for s in sorted(items, key=FILTRATIONS[filtration]):
            if s not in self._simplices:
                self._simplices[s] = s

    @classmethod
    def _from_ordered(cls, simplices: Iterable[Simplex], filtration: str) -> "SimplicialComplex":
        """Build a complex that keeps the given order verbatim."""
        K = cls(filtration=filtration)
        for s in simplices:
            K._simplices[s] = s
        return K

    # ---------------- queries ----------------

    def size(self) -> int:
        """Number of simplices."""
        return len(self._simplices)

    def dimension(self) -> int:
        """Maximum simplex dimension, or -1 for the empty complex."""
        return max((s.dimension() for s in self._simplices), default=-1)

    def range(self, dim: int) -> Iterator[Simplex]:
        """Iterate over the simplices of a given dimension, in order."""
        for s in self._simplices:
            if s.dimension() == dim:
                yield s

    def get(self, s: SimplexLike) -> Simplex:
        """Get the stored member equal to s (with its data payload)."""
        key = as_simplex(s)
        if key not in self._simplices:
            raise KeyError(f"Simplex not in complex: {list(key.vertices)}")
        return self._simplices[key]

    def index(self, s: SimplexLike) -> int:
        """Position of s in the enumeration order."""
        return self._ordered().index(as_simplex(s))

    def vertex_set(self) -> Set[Vertex]:
        """All vertices appearing in the complex."""
        out: Set[Vertex] = set()
        for s in self._simplices:
            out.update(s.vertices)
        return out

    def count_by_dimension(self) -> List[int]:
        """Number of simplices per dimension, index = dimension."""
        counts = [0] * (self.dimension() + 1)
        for s in self._simplices:
            counts[s.dimension()] += 1
        return counts

    def missing_faces(self) -> List[Tuple[Simplex, Simplex]]:
        """(simplex, face) pairs where the face is not a member."""
        out = []
        for s in self._simplices:
            for f in s.boundary():
                if f not in self._simplices:
                    out.append((s, f))
        return out

    def is_closed(self) -> bool:
        """True if every face of a member is itself a member."""
        return not self.missing_faces()

    def data_order_violations(self) -> List[Tuple[Simplex, Simplex]]:
        """(simplex, face) pairs where the stored face carries larger data than the simplex."""
        out = []
        for s in self._simplices.values():
            for f in s.boundary():
                member = self._simplices.get(f)
                if member is not None and member.data > s.data:
                    out.append((s, member))
        return out

    def validate(self) -> None:
        """
        Raise ValueError if the complex is not closed under faces, or if
        under the "data" filtration some face would succeed one of its
        cofaces.
        """
        missing = self.missing_faces()
        if missing:
            s, f = missing[0]
            raise ValueError(
                f"Complex is not closed: face {list(f.vertices)} of {list(s.vertices)} is missing "
                f"({len(missing)} missing face relations in total)"
            )
        if self.filtration == "data":
            bad = self.data_order_violations()
            if bad:
                s, f = bad[0]
                raise ValueError(
                    f"Data filtration is not face-first: face {list(f.vertices)} has data {f.data} "
                    f"above its coface {list(s.vertices)} with data {s.data}"
                )

    # ---------------- mutation ----------------

    def remove_without_validation(self, s: SimplexLike) -> None:
        """
        Remove a simplex without re-checking closure.

        The caller guarantees that s is not a face of any remaining member.
        """
        key = as_simplex(s)
        if key not in self._simplices:
            raise InvariantViolation(f"Cannot remove {list(key.vertices)}: not in complex")
        del self._simplices[key]
        self._order = None

    # ---------------- derived complexes ----------------

    def copy(self) -> "SimplicialComplex":
        """Independent copy preserving the enumeration order."""
        return SimplicialComplex._from_ordered(self._simplices.values(), self.filtration)

    def skeleton(self, k: int) -> "SimplicialComplex":
        """Sub-complex of all simplices of dimension <= k."""
        return SimplicialComplex._from_ordered(
            (s for s in self._simplices.values() if s.dimension() <= k), self.filtration
        )

    def to_list(self) -> List[List[Vertex]]:
        """Vertex lists of all simplices, in order."""
        return [list(s.vertices) for s in self._simplices]

    # ---------------- container protocol ----------------

    def _ordered(self) -> List[Simplex]:
        if self._order is None:
            self._order = list(self._simplices.values())
        return self._order

    def __getitem__(self, i: int) -> Simplex:
        return self._ordered()[i]

    def __iter__(self) -> Iterator[Simplex]:
        return iter(self._ordered())

    def __len__(self) -> int:
        return len(self._simplices)

    def __contains__(self, s: object) -> bool:
        if isinstance(s, Simplex):
            return s in self._simplices
        try:
            return as_simplex(s) in self._simplices
        except (TypeError, ValueError):
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimplicialComplex):
            return NotImplemented
        return self._simplices.keys() == other._simplices.keys()

    def __repr__(self) -> str:
        return f"SimplicialComplex(size={len(self)}, dim={self.dimension()})"


def closure(simplices: Sequence[SimplexLike], filtration: str = "dimension") -> SimplicialComplex:
    """
    Smallest complex containing the given simplices.

    Faces missing from the input take the smallest data value among their
    cofaces, so that the "data" filtration stays face-first whenever the
    given simplices are consistent with it.
    """
    seen: Dict[Simplex, Simplex] = {}
    for s in simplices:
        s = as_simplex(s)
        seen.setdefault(s, s)
    if not seen:
        return SimplicialComplex(filtration=filtration)

    explicit = set(seen)
    levels: List[List[Simplex]] = [[] for _ in range(max(s.dimension() for s in seen) + 1)]
    for s in seen:
        levels[s.dimension()].append(s)

    # Top-down, so every coface of a level is final before the level is visited
    for dim in range(len(levels) - 1, 0, -1):
        for s in levels[dim]:
            for f in seen[s].boundary():
                if f not in seen:
                    seen[f] = f
                    levels[dim - 1].append(f)
                elif f not in explicit and f.data < seen[f].data:
                    seen[f] = f
    return SimplicialComplex(seen.values(), filtration=filtration)

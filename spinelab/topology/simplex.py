"""
spinelab/topology/simplex.py

Simplex value type.

A simplex is a finite, non-empty set of vertices with an attached scalar
data value. Identity is the vertex set alone:
- Dimension = number of vertices - 1
- Boundary = codimension-1 faces, enumerated in a fixed order
- Equality and hashing ignore the data payload
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

Vertex = int


@dataclass(frozen=True, eq=False)
class Simplex:
    """
    A combinatorial simplex.

    Attributes:
        vertices: Canonical sorted vertex tuple
        data: Scalar payload (e.g. filtration value); not part of identity
    """
    vertices: Tuple[Vertex, ...]
    data: Any = 0.0

    def __post_init__(self):
        # Canonical representation: sorted, duplicate-free
        verts = tuple(sorted(set(self.vertices)))
        if not verts:
            raise ValueError("Simplex requires at least one vertex")
        object.__setattr__(self, "vertices", verts)

    def dimension(self) -> int:
        """Dimension of the simplex."""
        return len(self.vertices) - 1

    def boundary(self) -> Iterator["Simplex"]:
        """
        Enumerate the codimension-1 faces.

        Face i omits the i-th vertex of the canonical tuple; faces inherit the
        data value of this simplex. A vertex has no faces.
        """
        if len(self.vertices) == 1:
            return
        for i in range(len(self.vertices)):
            yield Simplex(self.vertices[:i] + self.vertices[i + 1:], self.data)

    def is_face_of(self, other: "Simplex") -> bool:
        """True if this simplex is a (not necessarily proper) face of other."""
        return set(self.vertices).issubset(other.vertices)

    def with_data(self, data: Any) -> "Simplex":
        """Copy of this simplex carrying a different payload."""
        return Simplex(self.vertices, data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Simplex):
            return NotImplemented
        return self.vertices == other.vertices

    def __hash__(self) -> int:
        return hash(self.vertices)

    def __lt__(self, other: "Simplex") -> bool:
        return (len(self.vertices), self.vertices) < (len(other.vertices), other.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __contains__(self, v: object) -> bool:
        return v in self.vertices

    def __repr__(self) -> str:
        return f"Simplex({list(self.vertices)}, data={self.data!r})"

"""
spinelab/core/registry.py

Vertex registry mapping external vertex labels to integer IDs.

Complexes read from files may use arbitrary hashable labels (strings,
integers). Internally every simplex is built over dense integer IDs so that
vertex tuples sort and hash deterministically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple


def _label_key(label: Any) -> Tuple[str, Any]:
    # Integers sort before strings; labels of one type sort naturally
    return (type(label).__name__, label)


@dataclass
class VertexRegistry:
    """
    Registry for mapping vertex labels to IDs.

    Attributes:
        label_to_id: Vertex label -> ID
        id_to_label: ID -> vertex label
    """
    label_to_id: Dict[Any, int]
    id_to_label: List[Any]

    @staticmethod
    def build(simplices: Iterable[Iterable[Any]]) -> "VertexRegistry":
        """
        Build a registry from the vertex labels of a collection of simplices.

        Args:
            simplices: Iterable of vertex label collections

        Returns:
            VertexRegistry with IDs assigned in sorted label order
        """
        labels = set()
        for s in simplices:
            labels.update(s)
        ordered = sorted(labels, key=_label_key)
        return VertexRegistry(
            label_to_id={label: i for i, label in enumerate(ordered)},
            id_to_label=ordered,
        )

    def vertex_id(self, label: Any) -> int:
        """Get vertex ID by label."""
        return self.label_to_id[label]

    def label(self, vid: int) -> Any:
        """Get vertex label by ID."""
        return self.id_to_label[vid]

    def encode(self, labels: Iterable[Any]) -> Tuple[int, ...]:
        """Translate a collection of labels to a sorted tuple of IDs."""
        return tuple(sorted(self.label_to_id[label] for label in labels))

    def decode(self, ids: Iterable[int]) -> List[Any]:
        """Translate IDs back to labels."""
        return [self.id_to_label[i] for i in ids]

    def is_identity(self) -> bool:
        """True if every label is already equal to its ID."""
        return all(label == i for i, label in enumerate(self.id_to_label))

    def __len__(self) -> int:
        return len(self.id_to_label)

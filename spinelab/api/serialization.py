"""
spinelab/api/serialization.py

JSON serialization of simplicial complexes.

Expected format:
{
    "simplices": [
        [0, 1, 2],
        {"vertices": ["a", "b"], "data": 0.5},
        ...
    ],
    "filtration": "dimension"
}

Vertex labels may be integers or strings; they are mapped to integer IDs
through a VertexRegistry and mapped back on output.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

from spinelab.core.registry import VertexRegistry
from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex


def _split_record(record: Any) -> Tuple[List[Any], Any]:
    if isinstance(record, dict):
        if "vertices" not in record:
            raise ValueError(f"Simplex record without 'vertices': {record}")
        return list(record["vertices"]), record.get("data", 0.0)
    if isinstance(record, (list, tuple)):
        return list(record), 0.0
    raise ValueError(f"Cannot parse simplex record: {record!r}")


def complex_from_records(
    records: List[Any],
    filtration: str = "dimension",
    validate: bool = True,
) -> Tuple[SimplicialComplex, VertexRegistry]:
    """
    Build a complex from a list of simplex records.

    Args:
        records: Vertex lists or {"vertices": [...], "data": x} dicts
        filtration: Enumeration order of the resulting complex
        validate: Reject complexes that are not closed under faces

    Returns:
        (complex over integer vertex IDs, registry to translate labels)
    """
    parsed = [_split_record(r) for r in records]
    for verts, _ in parsed:
        if not verts:
            raise ValueError("Empty simplex record")

    registry = VertexRegistry.build(verts for verts, _ in parsed)
    K = SimplicialComplex(
        (Simplex(registry.encode(verts), data) for verts, data in parsed),
        filtration=filtration,
    )
    if validate:
        K.validate()
    return K, registry


def complex_to_records(
    K: SimplicialComplex,
    registry: Optional[VertexRegistry] = None,
    with_data: bool = False,
) -> List[Any]:
    """Inverse of `complex_from_records`, in enumeration order."""
    out: List[Any] = []
    for s in K:
        verts = registry.decode(s.vertices) if registry is not None else list(s.vertices)
        if with_data:
            out.append({"vertices": verts, "data": s.data})
        else:
            out.append(verts)
    return out


def load_complex_from_json(filepath: str, validate: bool = True) -> Tuple[SimplicialComplex, VertexRegistry]:
    """Load a complex from a JSON file."""
    with open(filepath, "r") as f:
        data = json.load(f)

    if isinstance(data, list):
        records, filtration = data, "dimension"
    elif isinstance(data, dict) and "simplices" in data:
        records, filtration = data["simplices"], data.get("filtration", "dimension")
    else:
        raise ValueError(f"{filepath}: expected a list of simplices or an object with 'simplices'")

    return complex_from_records(records, filtration=filtration, validate=validate)


def save_complex_to_json(
    filepath: str,
    K: SimplicialComplex,
    registry: Optional[VertexRegistry] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Save a complex (and optional extra fields) to a JSON file."""
    output: Dict[str, Any] = {
        "filtration": K.filtration,
        "simplices": complex_to_records(K, registry, with_data=True),
    }
    if extra:
        output.update(extra)

    with open(filepath, "w") as f:
        json.dump(output, f, indent=2)

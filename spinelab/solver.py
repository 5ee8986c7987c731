"""
spinelab/solver.py

Spine computation.

This is the main entry point: reduce a simplicial complex by elementary
collapses until no principal simplex with a free face remains. The result
is homotopy-equivalent to the input and no larger.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from spinelab.reduction.engine import run_collapse
from spinelab.reduction.naive import naive_spine as _naive_spine
from spinelab.topology.complex import SimplicialComplex


@dataclass
class SpineResult:
    """Result of a spine computation."""
    spine: SimplicialComplex
    input_size: int
    collapses: int
    rebuilds: int
    complete: bool

    @property
    def removed(self) -> int:
        return self.input_size - len(self.spine)


def compute_spine(
    K: SimplicialComplex,
    *,
    method: str = "incremental",
    max_steps: Optional[int] = None,
    check_invariants: bool = False,
) -> SpineResult:
    """
    Compute the spine of a simplicial complex.

    Args:
        K: Face-closed simplicial complex (not modified)
        method: "incremental" (coface index) or "naive" (reference reducer)
        max_steps: Optional budget on the number of collapses (incremental only)
        check_invariants: Re-verify the coface index after every collapse

    Returns:
        SpineResult with the reduced complex and collapse statistics

    Example:
        >>> K = SimplicialComplex([(0, 1, 2), (0, 1), (0, 2), (1, 2), (0,), (1,), (2,)])
        >>> compute_spine(K).spine.size()
        1
    """
    if method == "incremental":
        state = run_collapse(K, max_steps=max_steps, check_invariants=check_invariants)
        return SpineResult(
            spine=state.complex,
            input_size=len(K),
            collapses=state.collapses,
            rebuilds=state.rebuilds,
            complete=state.done,
        )
    elif method == "naive":
        L = _naive_spine(K)
        return SpineResult(
            spine=L,
            input_size=len(K),
            collapses=(len(K) - len(L)) // 2,
            rebuilds=0,
            complete=True,
        )
    else:
        raise ValueError(f"Unknown method: {method}")


def spine(
    K: SimplicialComplex,
    *,
    max_steps: Optional[int] = None,
    check_invariants: bool = False,
) -> SimplicialComplex:
    """
    Spine of K via the incremental collapse engine.

    Args:
        K: Face-closed simplicial complex (not modified)
        max_steps: Optional budget on the number of collapses; when it runs
            out the partially reduced complex is returned
        check_invariants: Re-verify the coface index after every collapse

    Returns:
        New complex without admissible pairs
    """
    return compute_spine(K, max_steps=max_steps, check_invariants=check_invariants).spine


def naive_spine(K: SimplicialComplex) -> SimplicialComplex:
    """
    Spine of K via the naive reference reducer.

    Same contract as `spine`; intended for validating the incremental engine.
    """
    return compute_spine(K, method="naive").spine

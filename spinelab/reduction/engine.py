"""
spinelab/reduction/engine.py

Incremental collapse engine.

Reduces a simplicial complex to its spine by repeated elementary collapses.
All mutable state lives in an explicit CollapseState that is only changed
by the transition functions of this module:

1. `CollapseState.initial`: copy the complex, build the coface index, seed
   the admissible set with a full rebuild
2. `collapse_step`: collapse the admissible pair whose principal simplex
   comes first in enumeration order, update the coface index, re-probe the
   simplices around the removed pair, and fall back to a full rebuild when
   the admissible set runs empty
3. The state is DONE once a full rebuild finds no admissible pair

After collapsing (sigma, tau) only two kinds of simplices can change
admissibility or first free face: the faces of sigma and tau (which may
have become principal) and the cofaces of those faces (whose faces may have
become free). Re-probing exactly these keeps the admissible set equal to a
full rebuild, so the engine collapses the same pairs in the same order as
the naive reducer.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from spinelab.core.errors import InvariantViolation
from spinelab.reduction.admissible import AdmissibleMap, probe, rebuild
from spinelab.topology.cofaces import CofaceIndex
from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex

logger = logging.getLogger(__name__)


class CollapsePhase(Enum):
    COLLAPSING = "collapsing"
    DONE = "done"


@dataclass
class CollapseState:
    """
    State of one reduction.

    Attributes:
        complex: Working complex (a private copy of the input)
        cofaces: Coface index in sync with the working complex
        admissible: Pending admissible pairs, principal simplex -> free face
        position: Enumeration position of every simplex of the input
        queue: Min-heap of (position, simplex) over the admissible keys;
            entries whose simplex has left the admissible set are stale
        phase: COLLAPSING until a full rebuild finds nothing
        collapses: Number of elementary collapses applied
        rebuilds: Number of full admissible-set rebuilds, including seeding
    """
    complex: SimplicialComplex
    cofaces: CofaceIndex
    admissible: AdmissibleMap
    position: Dict[Simplex, int] = field(default_factory=dict)
    queue: List[Tuple[int, Simplex]] = field(default_factory=list)
    phase: CollapsePhase = CollapsePhase.COLLAPSING
    collapses: int = 0
    rebuilds: int = 0

    @classmethod
    def initial(cls, K: SimplicialComplex) -> "CollapseState":
        """Set up the reduction of K without touching K itself."""
        L = K.copy()
        cofaces = CofaceIndex.build(L)
        state = cls(
            complex=L,
            cofaces=cofaces,
            admissible={},
            position={s: i for i, s in enumerate(L)},
        )
        _rebuild(state)
        return state

    @property
    def done(self) -> bool:
        return self.phase is CollapsePhase.DONE


def _rebuild(state: CollapseState) -> None:
    state.admissible = rebuild(state.cofaces, state.complex)
    # rebuild() yields enumeration order, which is already a valid heap
    state.queue = [(state.position[s], s) for s in state.admissible]
    state.rebuilds += 1
    if not state.admissible:
        state.phase = CollapsePhase.DONE


def _enqueue(state: CollapseState, s: Simplex) -> None:
    heapq.heappush(state.queue, (state.position[s], s))


def select_pair(state: CollapseState) -> Tuple[Simplex, Simplex]:
    """Admissible pair whose principal simplex has the smallest enumeration position."""
    queue = state.queue
    while queue:
        _, sigma = queue[0]
        if sigma in state.admissible:
            return sigma, state.admissible[sigma]
        heapq.heappop(queue)
    raise InvariantViolation("no admissible pair to select")


def frontier(state: CollapseState, sigma: Simplex, tau: Simplex) -> List[Simplex]:
    """
    Simplices to re-probe after (sigma, tau) has been collapsed.

    Must be called after the coface index has been updated. Returns the
    faces of sigma other than tau, the faces of tau, and the current
    cofaces of all of these, without duplicates.
    """
    faces = [f for f in sigma.boundary() if f != tau]
    faces.extend(tau.boundary())

    seen: Dict[Simplex, None] = {}
    for f in faces:
        seen.setdefault(f)
        for c in sorted(state.cofaces.cofaces_of(f)):
            seen.setdefault(c)
    return list(seen)


def collapse_step(state: CollapseState) -> CollapseState:
    """
    Apply one elementary collapse and refresh the admissible set.

    Args:
        state: A state in the COLLAPSING phase

    Returns:
        The same state object, advanced by one collapse
    """
    if state.done:
        raise InvariantViolation("collapse_step called on a finished reduction")

    sigma, tau = select_pair(state)

    # tau is a face of sigma only and sigma is maximal, so closure is kept
    state.complex.remove_without_validation(sigma)
    state.complex.remove_without_validation(tau)
    del state.admissible[sigma]
    state.cofaces.collapse(sigma, tau)
    state.collapses += 1

    logger.debug("collapse %d: sigma=%s tau=%s", state.collapses, list(sigma.vertices), list(tau.vertices))

    added = 0
    for s in frontier(state, sigma, tau):
        if probe(state.cofaces, s, state.admissible):
            _enqueue(state, s)
            added += 1

    if not state.admissible:
        _rebuild(state)
        logger.debug(
            "admissible set exhausted after %d collapses; rebuild found %d pairs",
            state.collapses, len(state.admissible),
        )
    elif added:
        logger.debug("re-probe added %d pairs", added)

    return state


def run_collapse(
    K: SimplicialComplex,
    *,
    max_steps: Optional[int] = None,
    check_invariants: bool = False,
) -> CollapseState:
    """
    Reduce K until no admissible pair remains.

    Args:
        K: Face-closed simplicial complex (not modified)
        max_steps: Optional budget on the number of collapses
        check_invariants: After every collapse, verify the coface index and
            the admissible set against a from-scratch recomputation

    Returns:
        Final CollapseState; `state.complex` is the spine if `state.done`
    """
    if max_steps is not None and max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")

    state = CollapseState.initial(K)
    logger.info("collapse start: %d simplices, %d admissible pairs", len(K), len(state.admissible))

    while not state.done:
        if max_steps is not None and state.collapses >= max_steps:
            logger.info("step budget of %d collapses exhausted", max_steps)
            break
        collapse_step(state)
        if check_invariants:
            if not state.cofaces.consistent_with(state.complex):
                raise InvariantViolation(f"coface index out of sync after collapse {state.collapses}")
            if state.admissible != rebuild(state.cofaces, state.complex):
                raise InvariantViolation(f"admissible set out of sync after collapse {state.collapses}")

    logger.info(
        "collapse end: %d -> %d simplices (%d collapses, %d rebuilds)",
        len(K), len(state.complex), state.collapses, state.rebuilds,
    )
    return state

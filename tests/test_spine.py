"""
Tests for spine computation: properties of the result and agreement with
the naive reference reducer.
"""

import random

import numpy as np
import pytest

from spinelab import betti_numbers, build_vietoris_rips_complex, closure, compute_spine, naive_spine, spine
from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex


def hollow(n):
    """Boundary of the (n-1)-simplex on vertices 0..n-1."""
    return SimplicialComplex(s for s in closure([tuple(range(n))]) if s.dimension() < n - 1)


def annulus(n):
    """Triangulated annulus: a strip of 2n triangles around an n-gon."""
    triangles = []
    for i in range(n):
        a, b = i, (i + 1) % n
        a2, b2 = n + i, n + (i + 1) % n
        triangles.append((a, b, a2))
        triangles.append((b, a2, b2))
    return closure(triangles)


def random_points(seed, n=10):
    rng = np.random.default_rng(seed)
    return rng.random((n, 2))


def circle_points(n):
    theta = 2 * np.pi / n * np.arange(n)
    return np.column_stack([np.cos(theta), np.sin(theta)])


COMPLEXES = {
    "vertex": SimplicialComplex([(0,)]),
    "edge": closure([(0, 1)]),
    "triangle": closure([(0, 1, 2)]),
    "tetrahedron": closure([(0, 1, 2, 3)]),
    "4-simplex": closure([(0, 1, 2, 3, 4)]),
    "hollow triangle": hollow(3),
    "hollow tetrahedron": hollow(4),
    "path": closure([(0, 1), (1, 2), (2, 3)]),
    "disjoint points": SimplicialComplex([(0,), (1,), (2,)]),
    "bowtie": closure([(0, 1, 2), (2, 3, 4)]),
    "shared edge": closure([(0, 1, 2), (1, 2, 3)]),
    "triangle with whisker": closure([(0, 1, 2), (2, 3), (3, 4)]),
    "filled and hollow": closure([(0, 1, 2), (2, 3), (3, 4), (2, 4)]),
    "sphere with flap": SimplicialComplex(list(hollow(4)) + list(closure([(3, 4, 5)]))),
    "annulus": annulus(5),
    "rips 0": build_vietoris_rips_complex(random_points(0), 0.35, 2),
    "rips 1": build_vietoris_rips_complex(random_points(1), 0.4, 2),
    "rips 2": build_vietoris_rips_complex(random_points(2), 0.45, 2),
    "rips 3": build_vietoris_rips_complex(random_points(3, n=14), 0.4, 2),
    "rips 4": build_vietoris_rips_complex(random_points(4, n=12), 0.5, 2),
    "rips 1-skeleton": build_vietoris_rips_complex(random_points(5, n=12), 0.5, 1),
    "thick circle": build_vietoris_rips_complex(circle_points(30), 0.45, 2),
    "thick circle 3d": build_vietoris_rips_complex(circle_points(12), 1.5, 3),
}


@pytest.fixture(params=sorted(COMPLEXES), ids=sorted(COMPLEXES))
def complex_(request):
    return COMPLEXES[request.param]


class TestSpineProperties:
    def test_closed_and_no_larger(self, complex_):
        L = spine(complex_)
        assert L.is_closed()
        assert len(L) <= len(complex_)

    def test_idempotent(self, complex_):
        L = spine(complex_)
        result = compute_spine(L)
        assert result.spine == L
        assert result.collapses == 0

    def test_matches_naive_size(self, complex_):
        assert len(spine(complex_)) == len(naive_spine(complex_))

    def test_matches_naive_simplices(self, complex_):
        # Both reducers collapse the pair whose principal simplex comes first
        assert spine(complex_).to_list() == naive_spine(complex_).to_list()

    def test_preserves_betti_numbers(self, complex_):
        L = spine(complex_)
        b_in = betti_numbers(complex_)
        b_out = betti_numbers(L)
        # The spine may lose its top dimensions, which then have b = 0
        assert b_out == b_in[:len(b_out)]
        assert all(b == 0 for b in b_in[len(b_out):])

    def test_coface_index_consistent(self, complex_):
        result = compute_spine(complex_, check_invariants=True)
        assert result.complete

    def test_input_unchanged(self, complex_):
        before = complex_.to_list()
        spine(complex_)
        assert complex_.to_list() == before


class TestKnownSpines:
    def test_full_triangle(self):
        K = SimplicialComplex([(0, 1, 2), (0, 1), (0, 2), (1, 2), (0,), (1,), (2,)])
        assert len(K) == 7
        L = spine(K)
        assert len(L) == 1
        assert L == SimplicialComplex([(0,)])

    def test_hollow_triangle(self):
        K = SimplicialComplex([(0, 1), (0, 2), (1, 2), (0,), (1,), (2,)])
        L = spine(K)
        assert len(L) == 6
        assert L == K
        assert betti_numbers(L) == [1, 1]

    def test_hollow_tetrahedron(self):
        K = hollow(4)
        assert len(spine(K)) == 14

    def test_contractible_complexes_reduce_to_a_vertex(self):
        for K in (closure([(0, 1, 2, 3)]), closure([(0, 1, 2), (2, 3, 4)]), closure([(0, 1), (1, 2), (2, 3)])):
            L = spine(K)
            assert len(L) == 1
            assert L[0].dimension() == 0

    def test_annulus_reduces_to_a_cycle(self):
        L = spine(annulus(5))
        assert L.dimension() == 1
        assert betti_numbers(L) == [1, 1]
        # A cycle has as many edges as vertices
        counts = L.count_by_dimension()
        assert counts[0] == counts[1]

    def test_sphere_with_flap(self):
        K = COMPLEXES["sphere with flap"]
        L = spine(K)
        # The flap collapses onto vertex 3; the sphere stays
        assert len(L) == 14
        assert betti_numbers(L) == [1, 0, 1]


class TestReproducibility:
    def test_repeated_runs_identical(self, complex_):
        a = spine(complex_)
        b = spine(complex_)
        assert a.to_list() == b.to_list()

    def test_input_order_does_not_matter(self):
        simplices = list(closure([(0, 1, 2), (2, 3), (3, 4, 5), (1, 5)]))
        shuffled = simplices[:]
        random.Random(7).shuffle(shuffled)

        a = spine(SimplicialComplex(simplices))
        b = spine(SimplicialComplex(shuffled))
        assert a.to_list() == b.to_list()

    def test_payload_is_kept(self):
        K = SimplicialComplex([Simplex((0,), 0.25), Simplex((1,), 0.5), Simplex((0, 1), 1.0)])
        L = spine(K)
        # (1) is the first face of (0, 1) in boundary order
        assert L.to_list() == [[0]]
        assert L[0].data == 0.25


class TestComputeSpine:
    def test_result_fields(self):
        K = closure([(0, 1, 2)])
        result = compute_spine(K)
        assert result.input_size == 7
        assert result.collapses == 3
        assert result.removed == 6
        assert result.complete

    def test_naive_method(self):
        result = compute_spine(closure([(0, 1, 2)]), method="naive")
        assert len(result.spine) == 1
        assert result.collapses == 3
        assert result.complete

    def test_step_budget(self):
        K = closure([(0, 1, 2)])
        result = compute_spine(K, max_steps=2)
        assert not result.complete
        assert len(result.spine) == 3
        assert len(spine(K, max_steps=2)) == 3

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            compute_spine(closure([(0, 1)]), method="fast")

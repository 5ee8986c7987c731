"""
Example: Filled triangle.

      2
     / \
    0 --- 1

The 2-simplex with all of its faces collapses to a single vertex.
"""

from spinelab import SimplicialComplex, betti_numbers, compute_spine, naive_spine


def main():
    # Triangle with all of its faces
    K = SimplicialComplex([
        (0, 1, 2),
        (0, 1), (0, 2), (1, 2),
        (0,), (1,), (2,),
    ])

    print("Computing spine of the filled triangle...")
    result = compute_spine(K)

    print(f"\nInput size:  {result.input_size}")
    print(f"Spine size:  {len(result.spine)}")
    print(f"Collapses:   {result.collapses}")
    print(f"Spine:       {result.spine.to_list()}")

    # Verify with the reference reducer
    print("\n--- Verification by naive reduction ---")
    reference = naive_spine(K)
    print(f"Spine size (naive)       = {len(reference)}")
    print(f"Spine size (incremental) = {len(result.spine)}")
    print(f"Match: {len(reference) == len(result.spine)}")

    print(f"\nBetti numbers: {betti_numbers(K)} -> {betti_numbers(result.spine)}")


if __name__ == "__main__":
    main()

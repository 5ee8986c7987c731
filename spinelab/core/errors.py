"""
spinelab/core/errors.py

Error types shared across the package.
"""

from __future__ import annotations


class InvariantViolation(AssertionError):
    """
    A combinatorial invariant of the reduction was broken.

    Raised when a removed simplex is queried, a non-face is treated as a face,
    or a simplex that still serves as a face is removed. These are programming
    defects and are never caught inside the library.
    """

"""
Core module: error types and the vertex registry.
"""

from spinelab.core.errors import InvariantViolation
from spinelab.core.registry import VertexRegistry

__all__ = [
    "InvariantViolation",
    "VertexRegistry",
]

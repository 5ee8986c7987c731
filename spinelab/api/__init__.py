"""
API module: JSON serialization of complexes.
"""

from spinelab.api.serialization import (
    complex_from_records,
    complex_to_records,
    load_complex_from_json,
    save_complex_to_json,
)

__all__ = [
    "complex_from_records",
    "complex_to_records",
    "load_complex_from_json",
    "save_complex_to_json",
]

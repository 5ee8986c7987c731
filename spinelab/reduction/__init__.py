"""
Reduction module: admissible pairs, incremental collapse engine, and the
naive reference reducer.
"""

from spinelab.reduction.admissible import AdmissibleMap, probe, rebuild
from spinelab.reduction.engine import CollapsePhase, CollapseState, collapse_step, run_collapse, select_pair
from spinelab.reduction.naive import naive_spine, principal_faces

__all__ = [
    "AdmissibleMap",
    "probe",
    "rebuild",
    "CollapsePhase",
    "CollapseState",
    "collapse_step",
    "run_collapse",
    "select_pair",
    "naive_spine",
    "principal_faces",
]

"""
Tests for the vertex registry and JSON serialization.
"""

import json

import pytest

from spinelab import spine
from spinelab.api.serialization import (
    complex_from_records,
    complex_to_records,
    load_complex_from_json,
    save_complex_to_json,
)
from spinelab.core.registry import VertexRegistry
from spinelab.topology.complex import SimplicialComplex
from spinelab.topology.simplex import Simplex


class TestVertexRegistry:
    def test_build(self):
        reg = VertexRegistry.build([["b", "a"], ["c"]])
        assert reg.id_to_label == ["a", "b", "c"]
        assert reg.vertex_id("c") == 2
        assert reg.label(1) == "b"
        assert len(reg) == 3

    def test_mixed_labels(self):
        reg = VertexRegistry.build([[3, "x"], [1]])
        assert reg.id_to_label == [1, 3, "x"]

    def test_encode_decode(self):
        reg = VertexRegistry.build([["p", "q", "r"]])
        assert reg.encode(["r", "p"]) == (0, 2)
        assert reg.decode((0, 2)) == ["p", "r"]

    def test_identity(self):
        assert VertexRegistry.build([[0, 1], [2]]).is_identity()
        assert not VertexRegistry.build([[1, 2]]).is_identity()


class TestRecords:
    def test_string_labels(self):
        records = [["a", "b"], ["b", "c"], ["a", "c"], ["a"], ["b"], ["c"]]
        K, reg = complex_from_records(records)
        assert len(K) == 6
        assert K.to_list() == [[0], [1], [2], [0, 1], [0, 2], [1, 2]]
        assert complex_to_records(K, reg) == [["a"], ["b"], ["c"], ["a", "b"], ["a", "c"], ["b", "c"]]

    def test_data_records(self):
        records = [
            {"vertices": [0], "data": 0.0},
            {"vertices": [1], "data": 0.0},
            {"vertices": [0, 1], "data": 2.5},
        ]
        K, _ = complex_from_records(records, filtration="data")
        assert K.get((0, 1)).data == 2.5
        assert complex_to_records(K, with_data=True)[-1] == {"vertices": [0, 1], "data": 2.5}

    def test_not_closed(self):
        with pytest.raises(ValueError):
            complex_from_records([[0, 1], [0]])
        K, _ = complex_from_records([[0, 1], [0]], validate=False)
        assert len(K) == 2

    def test_data_not_face_first(self):
        records = [
            {"vertices": [0], "data": 2.0},
            {"vertices": [1], "data": 0.0},
            {"vertices": [0, 1], "data": 1.0},
        ]
        with pytest.raises(ValueError):
            complex_from_records(records, filtration="data")
        K, _ = complex_from_records(records, filtration="data", validate=False)
        assert len(K) == 3

    def test_malformed_records(self):
        with pytest.raises(ValueError):
            complex_from_records([[]])
        with pytest.raises(ValueError):
            complex_from_records([{"data": 1.0}])
        with pytest.raises(ValueError):
            complex_from_records(["abc", 5])


class TestJsonFiles:
    def test_load_list(self, tmp_path):
        path = tmp_path / "triangle.json"
        path.write_text(json.dumps([[0, 1, 2], [0, 1], [0, 2], [1, 2], [0], [1], [2]]))

        K, reg = load_complex_from_json(str(path))
        assert len(K) == 7
        assert reg.is_identity()

    def test_load_object(self, tmp_path):
        path = tmp_path / "cycle.json"
        path.write_text(json.dumps({"simplices": [["x", "y"], ["y", "z"], ["x", "z"], ["x"], ["y"], ["z"]]}))

        K, reg = load_complex_from_json(str(path))
        assert spine(K) == K
        assert reg.id_to_label == ["x", "y", "z"]

    def test_load_invalid(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"faces": []}))
        with pytest.raises(ValueError):
            load_complex_from_json(str(path))

    def test_save_spine(self, tmp_path):
        K, reg = complex_from_records([["u", "v", "w"], ["u", "v"], ["u", "w"], ["v", "w"], ["u"], ["v"], ["w"]])
        out = tmp_path / "spine.json"
        save_complex_to_json(str(out), spine(K), reg, extra={"input_size": len(K)})

        data = json.loads(out.read_text())
        assert data["input_size"] == 7
        assert data["filtration"] == "dimension"
        assert data["simplices"] == [{"vertices": ["u"], "data": 0.0}]

        L, _ = load_complex_from_json(str(out))
        assert L == SimplicialComplex([Simplex((0,))])

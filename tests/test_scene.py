"""
Tests for scene descriptors, view validation and JSON scene files.
"""
import copy
import json

import pytest

from wireframe_pipeline.camera import View
from wireframe_pipeline.errors import InvalidParameterError, PipelineError
from wireframe_pipeline.math_utils import Vec3
from wireframe_pipeline.scene import Scene, load_scene, process_scene


class TestProcessScene:

    def test_cube_scene(self, cube_descriptor):
        scene = process_scene(cube_descriptor)
        assert isinstance(scene, Scene)
        assert scene.view.prp == Vec3(0, 0, 5)
        assert scene.view.clip == (-1.0, 1.0, -1.0, 1.0, 1.0, 50.0)
        assert len(scene.models) == 1
        assert scene.models[0].type == "cube"

    def test_processing_twice_gives_equal_scenes(self, cube_descriptor):
        a = process_scene(cube_descriptor)
        b = process_scene(cube_descriptor)
        assert a.view == b.view
        assert a.models == b.models

    def test_models_default_to_empty(self, cube_descriptor):
        del cube_descriptor["models"]
        assert process_scene(cube_descriptor).models == ()

    def test_descriptor_is_not_shared(self, cube_descriptor):
        scene = process_scene(cube_descriptor)
        cube_descriptor["view"]["prp"][2] = 100
        cube_descriptor["models"][0]["width"] = 40
        assert scene.view.prp == Vec3(0, 0, 5)
        assert {v.x for v in scene.models[0].vertices} == {-1, 1}

    def test_descriptor_is_left_unchanged(self, cube_descriptor):
        snapshot = copy.deepcopy(cube_descriptor)
        process_scene(cube_descriptor)
        assert cube_descriptor == snapshot

    @pytest.mark.parametrize("descriptor", [None, [], "scene"])
    def test_not_a_mapping(self, descriptor):
        with pytest.raises(InvalidParameterError):
            process_scene(descriptor)

    def test_missing_view(self, cube_descriptor):
        del cube_descriptor["view"]
        with pytest.raises(InvalidParameterError, match="view"):
            process_scene(cube_descriptor)

    def test_models_must_be_a_list(self, cube_descriptor):
        cube_descriptor["models"] = {"type": "cube"}
        with pytest.raises(InvalidParameterError, match="models"):
            process_scene(cube_descriptor)

    def test_one_bad_model_fails_the_whole_scene(self, cube_descriptor):
        cube_descriptor["models"] += [
            {"type": "cone", "radius": 1, "height": 1, "sides": 4},
            {"type": "sphere", "radius": 1, "slices": 2, "stacks": 2},
        ]
        with pytest.raises(InvalidParameterError, match=r"models\[2\]") as excinfo:
            process_scene(cube_descriptor)
        assert excinfo.value.field == "models[2].slices"

    def test_errors_share_a_base_class(self, cube_descriptor):
        cube_descriptor["models"][0]["type"] = "teapot"
        with pytest.raises(PipelineError):
            process_scene(cube_descriptor)
        with pytest.raises(ValueError):
            process_scene(cube_descriptor)


class TestViewValidation:

    def view(self, **overrides):
        d = {"prp": [0, 0, 5], "srp": [0, 0, 0], "vup": [0, 1, 0],
             "clip": [-1, 1, -1, 1, 1, 50]}
        d.update(overrides)
        return d

    def test_valid(self):
        view = View.from_descriptor(self.view())
        assert view.z_min == pytest.approx(-1 / 50)
        assert view.v == Vec3(0, 1, 0)

    @pytest.mark.parametrize("overrides", [
        {"prp": [0, 0, 0]},
        {"vup": [0, 0, 1]},
        {"vup": [0, 0, -3]},
        {"clip": [-1, 1, -1, 1, 50, 50]},
        {"clip": [-1, 1, -1, 1, 60, 50]},
        {"clip": [-1, 1, -1, 1, 0, 50]},
        {"clip": [-1, 1, -1, 1, -1, 50]},
        {"clip": [1, -1, -1, 1, 1, 50]},
        {"clip": [-1, 1, 1, 1, 1, 50]},
        {"clip": [-1, 1, -1, 1, 1]},
        {"clip": "-1 1 -1 1 1 50"},
        {"clip": [-1, 1, -1, 1, 1, float("inf")]},
        {"prp": [0, 0]},
        {"srp": [0, "a", 0]},
    ])
    def test_rejected(self, overrides):
        with pytest.raises(InvalidParameterError):
            View.from_descriptor(self.view(**overrides))

    def test_missing_srp(self):
        d = self.view()
        del d["srp"]
        with pytest.raises(InvalidParameterError, match="srp"):
            View.from_descriptor(d)

    def test_axes_form_a_right_handed_basis(self):
        u, v, n = View.from_descriptor(self.view(prp=[4, 3, 5], srp=[0, 1, 0])).axes()
        assert tuple(u.cross(v)) == pytest.approx(tuple(n))


class TestLoadScene:

    def test_load_json(self, tmp_path, cube_descriptor):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps(cube_descriptor))
        scene = load_scene(path)
        assert scene.models == process_scene(cube_descriptor).models

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{\"view\": ")
        with pytest.raises(InvalidParameterError, match="not valid JSON"):
            load_scene(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scene(tmp_path / "nope.json")

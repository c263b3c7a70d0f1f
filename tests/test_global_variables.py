import json

import pytest

from ytengine.global_variables import GlobalVariables
from ytengine.vector import Vector3


@pytest.fixture
def gv(tmp_path):
    return GlobalVariables(tmp_path / "json")


def test_set_and_get_values(gv):
    gv.set_value("player", "hp", 10)
    gv.set_value("player", "speed", 2.5)
    gv.set_value("player", "offset", Vector3(1.0, 2.0, 3.0))
    assert gv.get_int_value("player", "hp") == 10
    assert gv.get_float_value("player", "speed") == 2.5
    assert gv.get_vector3_value("player", "offset") == Vector3(1.0, 2.0, 3.0)


def test_set_value_overwrites(gv):
    gv.set_value("g", "a", 1)
    gv.set_value("g", "a", 5)
    assert gv.get_int_value("g", "a") == 5


def test_add_item_does_not_overwrite(gv):
    gv.create_group("g")
    gv.add_item("g", "a", 1)
    gv.add_item("g", "a", 7)
    assert gv.get_int_value("g", "a") == 1


def test_add_item_requires_group(gv):
    with pytest.raises(KeyError):
        gv.add_item("missing", "a", 1)


def test_create_group_keeps_existing_items(gv):
    gv.set_value("g", "a", 3)
    gv.create_group("g")
    assert gv.get_int_value("g", "a") == 3
    assert "g" in gv


def test_missing_group_and_key_raise(gv):
    with pytest.raises(KeyError):
        gv.get_int_value("nope", "a")
    gv.create_group("g")
    with pytest.raises(KeyError):
        gv.get_float_value("g", "a")


def test_wrong_type_raises(gv):
    gv.set_value("g", "a", 3)
    with pytest.raises(TypeError):
        gv.get_float_value("g", "a")
    with pytest.raises(TypeError):
        gv.get_vector3_value("g", "a")


def test_unsupported_type_rejected(gv):
    with pytest.raises(TypeError):
        gv.set_value("g", "a", "text")


def test_vector_is_copied(gv):
    v = Vector3(1.0, 2.0, 3.0)
    gv.set_value("g", "v", v)
    v.x = 9.0
    out = gv.get_vector3_value("g", "v")
    out.y = 9.0
    assert gv.get_vector3_value("g", "v") == Vector3(1.0, 2.0, 3.0)


def test_save_file_content(gv):
    gv.set_value("g", "b", 2.5)
    gv.set_value("g", "a", 1)
    gv.set_value("g", "v", Vector3(1.0, 2.0, 3.0))
    path = gv.save_file("g")
    text = path.read_text(encoding="utf-8")
    assert path.name == "g.json"
    assert text.startswith('{\n    "g": {\n        "a": 1,')
    assert json.loads(text) == {"g": {"a": 1, "b": 2.5, "v": [1.0, 2.0, 3.0]}}


def test_save_missing_group_raises(gv):
    with pytest.raises(KeyError):
        gv.save_file("missing")


def test_round_trip(tmp_path):
    first = GlobalVariables(tmp_path)
    first.set_value("g", "n", 4)
    first.set_value("g", "f", 0.5)
    first.set_value("g", "v", Vector3(-1.0, 0.25, 8.0))
    first.save_file("g")
    second = GlobalVariables(tmp_path)
    second.load_files()
    assert second.get_int_value("g", "n") == 4
    assert second.get_float_value("g", "f") == 0.5
    assert second.get_vector3_value("g", "v") == Vector3(-1.0, 0.25, 8.0)


def test_whole_float_stays_float(tmp_path):
    first = GlobalVariables(tmp_path)
    first.set_value("g", "f", 3.0)
    first.save_file("g")
    second = GlobalVariables(tmp_path)
    second.load_file("g")
    assert second.get_float_value("g", "f") == 3.0
    with pytest.raises(TypeError):
        second.get_int_value("g", "f")


def test_load_files_missing_directory(tmp_path):
    gv = GlobalVariables(tmp_path / "absent")
    gv.load_files()
    assert "anything" not in gv


def test_load_files_skips_other_extensions(tmp_path):
    (tmp_path / "notes.txt").write_text("not json", encoding="utf-8")
    (tmp_path / "g.json").write_text(json.dumps({"g": {"a": 2}}), encoding="utf-8")
    gv = GlobalVariables(tmp_path)
    gv.load_files()
    assert gv.get_int_value("g", "a") == 2
    assert "notes" not in gv


def test_load_file_missing_raises(gv):
    with pytest.raises(OSError):
        gv.load_file("missing")


def test_load_file_without_group_raises(tmp_path):
    (tmp_path / "g.json").write_text(json.dumps({"other": {"a": 1}}), encoding="utf-8")
    gv = GlobalVariables(tmp_path)
    with pytest.raises(KeyError):
        gv.load_file("g")
import json

import pytest

from frameutils.json_wrapper import JsonWrapper, strip_json_comments


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_open_file_ignores_comments(tmp_path):
    path = _write(
        tmp_path / "conf.json",
        '{\n  // line comment\n  "Flash": {"fps": 30 /* block */},\n  "name": "a//b"\n}\n',
    )
    wrapper = JsonWrapper()
    wrapper.open_file(path)
    assert wrapper.get_param("fps", "Flash") == 30
    assert wrapper.get_param("name") == "a//b"


def test_open_files_replaces_top_level_keys(tmp_path):
    first = _write(tmp_path / "a.json", '{"a": {"x": 1, "y": 2}, "b": 5}')
    second = _write(tmp_path / "b.json", '{"a": {"x": 3}}')
    wrapper = JsonWrapper()
    wrapper.open_files([first, second])
    assert wrapper.get_section("a") == {"x": 3}
    assert wrapper.get_param("b") == 5


def test_missing_file_leaves_document_unchanged(tmp_path):
    wrapper = JsonWrapper()
    wrapper.open_file(tmp_path / "absent.json")
    assert wrapper.root is None
    assert wrapper.contains_param("anything") is False


def test_invalid_json_is_skipped(tmp_path):
    good = _write(tmp_path / "good.json", '{"k": 1}')
    bad = _write(tmp_path / "bad.json", '{"k": ')
    wrapper = JsonWrapper()
    wrapper.open_files([good, bad])
    assert wrapper.root == {"k": 1}


def test_write_file_is_compact(tmp_path):
    wrapper = JsonWrapper()
    wrapper.set_param("b", 1, "a")
    out = tmp_path / "out.json"
    wrapper.write_file(out)
    assert out.read_text() == '{"a":{"b":1}}'


def test_write_then_read_round_trip(tmp_path):
    wrapper = JsonWrapper()
    wrapper.set_vector("Luminance", "values", (0.5, 1.5))
    wrapper.set_param("top", "value")
    out = tmp_path / "out.json"
    wrapper.write_file(out)
    reread = JsonWrapper()
    reread.open_file(out)
    assert reread.get_vector("Luminance", "values") == [0.5, 1.5]
    assert reread.get_param("top") == "value"
    assert json.loads(out.read_text()) == wrapper.root


def test_set_param_into_non_object_section_raises():
    wrapper = JsonWrapper()
    wrapper.set_param("scalar", 3)
    with pytest.raises(TypeError):
        wrapper.set_param("inner", 1, "scalar")


def test_get_param_missing_raises():
    wrapper = JsonWrapper()
    wrapper.set_param("x", 1, "s")
    with pytest.raises(KeyError):
        wrapper.get_param("y", "s")
    with pytest.raises(KeyError):
        wrapper.get_param("x", "other")


def test_get_vector_of_scalar_raises():
    wrapper = JsonWrapper()
    wrapper.set_param("x", 1, "s")
    with pytest.raises(TypeError):
        wrapper.get_vector("s", "x")


def test_get_section_adds_missing_entry():
    wrapper = JsonWrapper()
    assert wrapper.get_section("new") is None
    assert wrapper.contains_param("new") is True


def test_get_section_returns_live_object():
    wrapper = JsonWrapper()
    wrapper.set_param("x", 1, "s")
    wrapper.get_section("s")["y"] = 2
    assert wrapper.get_param("y", "s") == 2


def test_contains_param_in_section():
    wrapper = JsonWrapper()
    wrapper.set_param("x", 1, "s")
    assert wrapper.contains_param("x", "s") is True
    assert wrapper.contains_param("z", "s") is False
    assert wrapper.contains_param("x", "missing") is False


def test_strip_keeps_comment_markers_in_strings():
    text = '{"url": "http://host/*x*/"} // tail'
    assert json.loads(strip_json_comments(text)) == {"url": "http://host/*x*/"}


def test_strip_unterminated_block_comment_raises():
    with pytest.raises(ValueError):
        strip_json_comments('{"a": 1} /* open')
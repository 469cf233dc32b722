import json

import pytest

from shelfbox.jsonfile import StoreError, atomic_write_json, read_json


def test_round_trip(tmp_path):
    data = {"version": 1, "repos": {"a": {"root": "/x"}}}
    path = tmp_path / "doc.json"
    atomic_write_json(path, data)
    assert read_json(path) == data


def test_creates_missing_parent_directories(tmp_path):
    path = tmp_path / "deep" / "nested" / "doc.json"
    atomic_write_json(path, [1, 2, 3])
    assert read_json(path) == [1, 2, 3]


def test_temp_file_is_not_left_behind(tmp_path):
    path = tmp_path / "doc.json"
    atomic_write_json(path, {"k": "v"})
    assert read_json(path) == {"k": "v"}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.json"]


def test_output_is_pretty_printed(tmp_path):
    path = tmp_path / "doc.json"
    atomic_write_json(path, {"k": "v"})
    text = path.read_text(encoding="utf-8")
    assert text.count("\n") >= 2
    assert json.loads(text) == {"k": "v"}


def test_overwrites_existing_file(tmp_path):
    path = tmp_path / "doc.json"
    atomic_write_json(path, {"n": 1})
    atomic_write_json(path, {"n": 2})
    assert read_json(path) == {"n": 2}


def test_missing_file_raises_not_found(tmp_path):
    path = tmp_path / "absent.json"
    with pytest.raises(StoreError) as info:
        read_json(path)
    assert info.value.not_found
    assert info.value.path == path


def test_invalid_json_raises_store_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError) as info:
        read_json(path)
    assert not info.value.not_found
    assert str(path) in str(info.value)


def test_unserialisable_data_raises_store_error(tmp_path):
    path = tmp_path / "doc.json"
    with pytest.raises(StoreError):
        atomic_write_json(path, {"bad": object()})
    assert not path.exists()
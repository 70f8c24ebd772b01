from pathlib import Path

import pytest

from advent2024.input import ROOT_ENV, file_in_src, input_to_string


def test_file_in_src_uses_root_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(ROOT_ENV, str(tmp_path))
    assert file_in_src("day01/input.txt") == tmp_path / "src" / "day01" / "input.txt"


def test_file_in_src_accepts_path_objects(monkeypatch, tmp_path):
    monkeypatch.setenv(ROOT_ENV, str(tmp_path))
    assert file_in_src(Path("day02") / "example.txt") == tmp_path / "src" / "day02" / "example.txt"


def test_input_to_string_round_trip(monkeypatch, tmp_path):
    monkeypatch.setenv(ROOT_ENV, str(tmp_path))
    target = tmp_path / "src" / "day03"
    target.mkdir(parents=True)
    content = "mul(2,4)\nsecond line\n"
    (target / "input.txt").write_text(content)
    assert input_to_string("day03/input.txt") == content


def test_input_to_string_falls_back_to_working_directory(monkeypatch, tmp_path):
    monkeypatch.delenv(ROOT_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "data.txt").write_text("abc")
    assert input_to_string("data.txt") == "abc"


def test_missing_file_raises(monkeypatch, tmp_path):
    monkeypatch.setenv(ROOT_ENV, str(tmp_path))
    with pytest.raises(FileNotFoundError):
        input_to_string("day99/input.txt")
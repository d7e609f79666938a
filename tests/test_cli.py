from __future__ import annotations

import pytest

import toml_sort
from scripts.tomlsort import CONFIG_FILE


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_files_prints_help(workdir, capsys):
    assert toml_sort.main([]) == toml_sort.EXIT_USAGE
    out = capsys.readouterr().out
    assert "No 'toml-sort.toml'" in out
    assert "usage: toml-sort" in out


def test_overwrites_unsorted_file(workdir, capsys):
    path = workdir / "data.toml"
    path.write_text("b = 1\na = 2\n", encoding="utf-8")
    assert toml_sort.main([str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "a = 2\nb = 1\n"
    assert "Overwritten:" in capsys.readouterr().out


def test_reports_unchanged_file(workdir, capsys):
    path = workdir / "data.toml"
    path.write_text("a = 2\nb = 1\n", encoding="utf-8")
    assert toml_sort.main([str(path)]) == 0
    assert "Unchanged:" in capsys.readouterr().out


def test_check_failure(workdir, capsys):
    path = workdir / "data.toml"
    path.write_text("b = 1\na = 2\n", encoding="utf-8")
    assert toml_sort.main(["--check", str(path)]) == toml_sort.EXIT_CHECK_FAILED
    assert path.read_text(encoding="utf-8") == "b = 1\na = 2\n"
    assert "Check fails" in capsys.readouterr().err


def test_check_success(workdir, capsys):
    path = workdir / "data.toml"
    path.write_text("a = 2\nb = 1\n", encoding="utf-8")
    assert toml_sort.main(["-c", str(path)]) == 0
    assert "Check succeed:" in capsys.readouterr().out


def test_uses_discovered_config(workdir, capsys):
    (workdir / CONFIG_FILE).write_text('keys = ["name"]\n', encoding="utf-8")
    path = workdir / "data.toml"
    path.write_text('age = 3\nname = "x"\n', encoding="utf-8")
    assert toml_sort.main([str(path)]) == 0
    assert path.read_text(encoding="utf-8") == 'name = "x"\nage = 3\n'
    assert "No 'toml-sort.toml'" not in capsys.readouterr().out


def test_invalid_config_falls_back_to_defaults(workdir):
    (workdir / CONFIG_FILE).write_text("keys = 1\n", encoding="utf-8")
    path = workdir / "data.toml"
    path.write_text('name = "x"\nage = 3\n', encoding="utf-8")
    assert toml_sort.main([str(path)]) == 0
    assert path.read_text(encoding="utf-8") == 'age = 3\nname = "x"\n'


def test_missing_file(workdir, capsys):
    assert toml_sort.main([str(workdir / "missing.toml")]) == toml_sort.EXIT_READ_ERROR
    assert "Error while reading file" in capsys.readouterr().err


def test_invalid_toml(workdir, capsys):
    path = workdir / "broken.toml"
    path.write_text("a = [\n", encoding="utf-8")
    assert toml_sort.main([str(path)]) == toml_sort.EXIT_USAGE
    assert "Invalid TOML" in capsys.readouterr().err

"""Command-line entry point."""

import sys

import pytest
from PIL import Image

import main


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["main.py", *args])
    main.main_wrapper()


def test_saves_png(monkeypatch, tmp_path, capsys):
    path = tmp_path / "scene.png"
    _run(monkeypatch, f"--out={path}", "--width=60", "--height=40")

    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == (60, 40)
    assert f"Image saved as {path}" in capsys.readouterr().out


def test_save_failure_exits_non_zero(monkeypatch, tmp_path, capsys):
    path = tmp_path / "missing" / "scene.png"
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, f"--out={path}", "--width=10", "--height=10")

    assert exc.value.code == 1
    assert "Error saving image" in capsys.readouterr().err
    assert not path.exists()


def test_dump_mode_writes_text(monkeypatch, tmp_path):
    path = tmp_path / "scene.txt"
    _run(monkeypatch, "--dump", f"--dump-path={path}", "--step=20")

    lines = path.read_text().rstrip("\n").split("\n")
    assert len(lines) == 30
    assert all(len(line) == 40 for line in lines)


def test_malformed_args_fall_back_to_defaults(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["main.py", "--width=abc", "--height=-3"])
    assert main._canvas_size() == (800, 600)
    assert main._str_arg("out", "out.png") == "out.png"
    assert main._int_arg("step", 8) == 8

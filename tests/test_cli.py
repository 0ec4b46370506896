from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from ejforge.cli import build_parser, main


@pytest.fixture(autouse=True)
def no_elixir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend no Elixir toolchain is installed."""

    monkeypatch.setattr(shutil, "which", lambda name: None)


def test_parser_reads_new_flags():
    args = build_parser().parse_args(
        ["new", "demo", "--sup", "--app", "demo", "--module", "Demo.App", "--no-exconfig"]
    )
    assert args.path == "demo"
    assert args.sup is True
    assert args.app == "demo"
    assert args.module == "Demo.App"
    assert args.no_exconfig is True
    assert args.install is None


def test_cli_new_creates_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    project_dir = tmp_path / "myapp"
    exit_code = main(["new", str(project_dir), "--no-install"], env={})

    assert exit_code == 0
    assert (project_dir / "lib" / "myapp.ex").read_text(encoding="utf-8").startswith(
        "defmodule Myapp do"
    )
    mixfile = (project_dir / "mix.exs").read_text(encoding="utf-8")
    assert 'elixir: "~> 1.2",' in mixfile
    assert '[{:ejabberd, "~> 16.4.1"}]' in mixfile
    assert "created successfully" in capsys.readouterr().out


def test_cli_new_uses_settings_and_version_override(tmp_path: Path):
    project_dir = tmp_path / "demo"
    exit_code = main(
        [
            "new",
            str(project_dir),
            "--sup",
            "--module",
            "Demo.App",
            "--no-exconfig",
            "--elixir-version",
            "1.4.0-rc.1",
            "--no-install",
        ],
        env={"EJFORGE_EJABBERD_VERSION": "17.1.0"},
    )

    assert exit_code == 0
    mixfile = (project_dir / "mix.exs").read_text(encoding="utf-8")
    assert 'elixir: "~> 1.4-rc",' in mixfile
    assert '[{:ejabberd, "~> 17.1.0"}]' in mixfile
    assert "mod: {Demo.App, []}" in mixfile
    assert (project_dir / "config" / "ejabberd.yml").exists()


def test_cli_reports_validation_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    project_dir = tmp_path / "myapp"
    exit_code = main(["new", str(project_dir), "--module", "lower.case", "--no-install"], env={})

    assert exit_code == 1
    assert "Module name must be a valid Elixir alias" in capsys.readouterr().err
    assert not project_dir.exists()


def test_cli_rejects_taken_module(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["new", str(tmp_path / "enum"), "--module", "Enum", "--no-install"], env={})

    assert exit_code == 1
    assert "already taken" in capsys.readouterr().err


def test_cli_requires_path():
    with pytest.raises(SystemExit) as excinfo:
        main(["new"], env={})
    assert excinfo.value.code == 2


@pytest.mark.parametrize("path", ["", "   "])
def test_cli_rejects_empty_path(path: str, capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["new", path, "--no-install"], env={})
    assert excinfo.value.code == 2
    assert "PATH must not be empty" in capsys.readouterr().err

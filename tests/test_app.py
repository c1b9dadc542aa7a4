"""Tests for the command line entry point."""

import json
import re

import pytest
import yaml

from bankthemes.app import run_app


@pytest.fixture
def project(tmp_path):
    button = tmp_path / "src" / "components" / "Button"
    (button / "bocc").mkdir(parents=True)
    (button / "Button.tsx").write_text("", encoding="utf-8")
    (button / "bocc" / "Button.tsx").write_text("", encoding="utf-8")
    return tmp_path


def test_writes_config_for_env_theme(project, capsys):
    code = run_app(["--project-root", str(project)], environ={"BUILD_THEME": "bocc"})
    assert code == 0
    out = capsys.readouterr().out.strip()
    config = yaml.safe_load((project / ".theme-build" / "bocc.yaml").read_text(encoding="utf-8"))
    assert out.endswith("bocc.yaml")
    assert config["resolve"]["alias"]["@/components/Button$"].endswith("Button/bocc/Button.tsx")


def test_theme_flag_overrides_environment(project, capsys):
    code = run_app(
        ["--project-root", str(project), "--theme", "BPOP", "--print", "--output", "x.json"],
        environ={"BUILD_THEME": "bocc"},
    )
    assert code == 0
    config = json.loads(capsys.readouterr().out)
    assert config["env"]["NEXT_PUBLIC_THEME"] == "BPOP"
    assert config["resolve"]["alias"]["@/components/Button$"].endswith("Button/Button.tsx")
    assert not (project / "x.json").exists()


def test_merges_host_config(project, capsys):
    host = project / "host.json"
    host.write_text(json.dumps({"resolve": {"alias": {"lodash$": "/l.js"}}}), encoding="utf-8")
    output = project / "merged.json"
    code = run_app(
        ["--project-root", str(project), "--host-config", str(host), "--output", str(output)],
        environ={},
    )
    assert code == 0
    config = json.loads(output.read_text(encoding="utf-8"))
    assert config["resolve"]["alias"]["lodash$"] == "/l.js"
    assert "theme" not in config
    assert config["env"]["NEXT_PUBLIC_THEME"] == "BBOG"


def test_invalid_theme_exits_nonzero_with_valid_set(project, capsys):
    code = run_app(["--project-root", str(project)], environ={"BUILD_THEME": "XYZ"})
    assert code == 1
    err = capsys.readouterr().err
    assert "Invalid BUILD_THEME: XYZ" in err
    assert "BBOG, BOCC, BAVV, BPOP" in err
    assert not (project / ".theme-build").exists()


def test_custom_theme_catalog(project, capsys):
    (project / "themes.yaml").write_text("themes:\n  bbog: BBOG\n  bocc: BOCC-CO\n", encoding="utf-8")
    code = run_app(
        ["--project-root", str(project), "--print"],
        environ={"BUILD_THEME": "bocc", "BANKTHEMES_THEMES_FILE": "themes.yaml"},
    )
    assert code == 0
    config = yaml.safe_load(capsys.readouterr().out)
    assert config["env"]["NEXT_PUBLIC_BRAND_KEY"] == "BOCC-CO"
    assert len(config["module"]["rules"][0]["exclude"]) == 1


def test_log_file_written(project, tmp_path, capsys):
    log_file = tmp_path / "build.log"
    code = run_app(
        ["--project-root", str(project), "--print", "-v", "--log-file", str(log_file)],
        environ={},
    )
    assert code == 0
    assert "building theme=BBOG" in log_file.read_text(encoding="utf-8")


def test_relative_project_root_yields_absolute_paths(project, tmp_path, monkeypatch, capsys):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    code = run_app(["--project-root", "..", "--print"], environ={"BUILD_THEME": "bbog"})
    assert code == 0
    config = yaml.safe_load(capsys.readouterr().out)

    alias = config["resolve"]["alias"]["@/components/Button$"]
    assert alias == str(project / "src" / "components" / "Button" / "Button.tsx")
    rejected = (project / "src" / "components" / "Button" / "bocc" / "Button.tsx").as_posix()
    patterns = config["module"]["rules"][0]["exclude"]
    assert any(re.search(pattern, rejected) for pattern in patterns)


def test_catalog_without_builtin_default(project, capsys):
    (project / "themes.yaml").write_text("themes:\n  alpha: ALPHA\n  beta: BETA\n", encoding="utf-8")
    env = {"BANKTHEMES_THEMES_FILE": "themes.yaml"}

    code = run_app(["--project-root", str(project), "--print"], environ={**env, "BUILD_THEME": "beta"})
    assert code == 0
    config = yaml.safe_load(capsys.readouterr().out)
    assert config["env"] == {"NEXT_PUBLIC_THEME": "BETA", "NEXT_PUBLIC_BRAND_KEY": "BETA"}

    code = run_app(["--project-root", str(project), "--print"], environ=env)
    assert code == 0
    assert yaml.safe_load(capsys.readouterr().out)["distDir"] == "build/alpha"


def test_module_entry_point_is_app_main():
    from bankthemes import __main__ as module_main
    from bankthemes import app

    assert module_main.main is app.main

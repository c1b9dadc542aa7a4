from __future__ import annotations

from pathlib import Path

from bankthemes import runtime_paths
from bankthemes.config.settings import BuildSettings
from bankthemes.themes.registry import ThemeRegistry


def test_build_theme_unset_is_none() -> None:
    settings = BuildSettings(environ={})
    assert settings.build_theme is None


def test_build_theme_strips_and_blank_is_none() -> None:
    assert BuildSettings(environ={"BUILD_THEME": "  bocc "}).build_theme == "bocc"
    assert BuildSettings(environ={"BUILD_THEME": "   "}).build_theme is None


def test_build_theme_override_wins() -> None:
    settings = BuildSettings(environ={"BUILD_THEME": "bocc"})
    settings.build_theme = " BPOP "
    assert settings.build_theme == "BPOP"


def test_project_root_precedence(tmp_path: Path) -> None:
    env = {"BANKTHEMES_PROJECT_ROOT": str(tmp_path / "env")}
    assert BuildSettings(environ=env).project_root == tmp_path / "env"
    assert BuildSettings(environ=env, project_root=tmp_path).project_root == tmp_path
    assert BuildSettings(environ={}).project_root == Path.cwd()


def test_relative_paths_resolve_against_project_root(tmp_path: Path) -> None:
    env = {"BANKTHEMES_THEMES_FILE": "themes.yaml", "BANKTHEMES_OUTPUT": "out/cfg.json"}
    settings = BuildSettings(environ=env, project_root=tmp_path)
    assert settings.themes_file == tmp_path / "themes.yaml"
    assert settings.output_path == tmp_path / "out" / "cfg.json"
    assert BuildSettings(environ={}, project_root=tmp_path).themes_file is None


def test_layout_paths(tmp_path: Path) -> None:
    theme = ThemeRegistry().resolve("BAVV")
    assert runtime_paths.components_root(tmp_path) == tmp_path / "src" / "components"
    assert runtime_paths.theme_variables_path(tmp_path, theme) == (
        tmp_path / "src" / "styles" / "themes" / "bavv" / "_variables.scss"
    )
    assert runtime_paths.mixins_path(tmp_path) == tmp_path / "src" / "styles" / "_mixins.scss"
    assert runtime_paths.dist_dir(theme) == "build/bavv"
    assert runtime_paths.default_output_path(tmp_path, theme).name == "bavv.yaml"


def test_relative_project_root_is_made_absolute(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "proj").mkdir()
    monkeypatch.chdir(tmp_path / "proj")
    assert BuildSettings(environ={}, project_root="..").project_root == tmp_path
    env = {"BANKTHEMES_PROJECT_ROOT": "../proj"}
    assert BuildSettings(environ=env).project_root == tmp_path / "proj"

"""Project layout helpers for a themed component library."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bankthemes.themes.models import ThemeIdentifier


def source_root(project_root: Path) -> Path:
    return project_root / "src"


def components_root(project_root: Path) -> Path:
    """Directory whose immediate subdirectories are the components."""
    return source_root(project_root) / "components"


def styles_root(project_root: Path) -> Path:
    return source_root(project_root) / "styles"


def theme_variables_path(project_root: Path, theme: ThemeIdentifier) -> Path:
    """Sass variables for one theme: src/styles/themes/<token>/_variables.scss."""
    return styles_root(project_root) / "themes" / theme.token / "_variables.scss"


def mixins_path(project_root: Path) -> Path:
    return styles_root(project_root) / "_mixins.scss"


def dist_dir(theme: ThemeIdentifier) -> str:
    """Output directory for one theme, relative to the project root."""
    return f"build/{theme.token}"


def default_output_path(project_root: Path, theme: ThemeIdentifier) -> Path:
    return project_root / ".theme-build" / f"{theme.token}.yaml"

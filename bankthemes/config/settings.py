"""Build settings read from the process environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from bankthemes.themes.constants import THEME_ENV_VAR


class BuildSettings:
    """Wraps the environment for one build invocation.

    Values are read when accessed and never written back.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        project_root: str | Path | None = None,
    ) -> None:
        self._env = dict(os.environ if environ is None else environ)
        self._project_root = Path(project_root).resolve() if project_root else None
        self._theme_override: str | None = None
        self._output_override: Path | None = None

    # -- theme --

    @property
    def build_theme(self) -> str | None:
        """Raw theme value; None when unset so the registry applies its default."""
        if self._theme_override is not None:
            return self._theme_override
        raw = self._env.get(THEME_ENV_VAR)
        value = (raw or "").strip()
        return value or None

    @build_theme.setter
    def build_theme(self, value: str | None) -> None:
        cleaned = (value or "").strip()
        self._theme_override = cleaned or None

    @property
    def themes_file(self) -> Path | None:
        """Optional YAML catalog replacing the built-in theme set."""
        raw = (self._env.get("BANKTHEMES_THEMES_FILE") or "").strip()
        if not raw:
            return None
        path = Path(raw)
        return path if path.is_absolute() else self.project_root / path

    # -- paths --

    @property
    def project_root(self) -> Path:
        if self._project_root is not None:
            return self._project_root
        raw = (self._env.get("BANKTHEMES_PROJECT_ROOT") or "").strip()
        return Path(raw).resolve() if raw else Path.cwd()

    @property
    def output_path(self) -> Path | None:
        if self._output_override is not None:
            return self._output_override
        raw = (self._env.get("BANKTHEMES_OUTPUT") or "").strip()
        if not raw:
            return None
        path = Path(raw)
        return path if path.is_absolute() else self.project_root / path

    @output_path.setter
    def output_path(self, value: str | Path | None) -> None:
        self._output_override = Path(value) if value else None

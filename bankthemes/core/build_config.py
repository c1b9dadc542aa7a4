"""Write the resolved theme build configuration for the host build tool."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

import yaml

from bankthemes import runtime_paths
from bankthemes.errors import classify_os_error
from bankthemes.themes.service import merge_into_host

if TYPE_CHECKING:
    from bankthemes.config.settings import BuildSettings
    from bankthemes.themes.service import BuildConfig


class BuildConfigWriter:
    """Serializes a BuildConfig (merged into any host config) to YAML or JSON."""

    def __init__(self, settings: BuildSettings) -> None:
        self._settings = settings

    def output_path(self, build: BuildConfig) -> Path:
        return self._settings.output_path or runtime_paths.default_output_path(
            self._settings.project_root, build.theme
        )

    def render(self, build: BuildConfig, host_config: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return merge_into_host(host_config or {}, build)

    def dumps(self, document: Mapping[str, Any], *, as_json: bool = False) -> str:
        if as_json:
            return json.dumps(document, indent=2, sort_keys=False) + "\n"
        return yaml.safe_dump(dict(document), default_flow_style=False, sort_keys=False)

    def generate(self, build: BuildConfig, host_config: Mapping[str, Any] | None = None) -> Path:
        """Write the config file and return its path."""
        path = self.output_path(build)
        document = self.render(build, host_config)
        text = self.dumps(document, as_json=path.suffix.lower() == ".json")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise classify_os_error(exc, path, "write") from exc
        return path

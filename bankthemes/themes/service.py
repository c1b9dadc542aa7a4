"""Build configuration assembly for one theme."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping

from bankthemes import runtime_paths
from bankthemes.themes.compiler import compile_style_prelude
from bankthemes.themes.constants import (
    ENV_BRAND_KEY,
    ENV_THEME_KEY,
    RESOLVE_EXTENSIONS,
    SOURCE_FILE_TEST,
)
from bankthemes.themes.fs import FileSystem, LocalFileSystem
from bankthemes.themes.models import ResolutionResult, ThemeIdentifier
from bankthemes.themes.registry import ThemeRegistry
from bankthemes.themes.resolver import resolve_components

if TYPE_CHECKING:
    from bankthemes.config.settings import BuildSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildConfig:
    """Everything the host build tool needs for one themed build."""

    theme: ThemeIdentifier
    brand_key: str
    resolution: ResolutionResult
    dist_dir: str
    include_paths: tuple[str, ...] = ()
    prepend_data: str = ""
    extensions: tuple[str, ...] = RESOLVE_EXTENSIONS
    env: dict[str, str] = field(default_factory=dict)

    def alias_map(self) -> dict[str, str]:
        """Aliases keyed for exact matching by the host resolver."""
        return {
            f"{entry.alias_key}$": str(entry.resolved_path)
            for entry in self.resolution.entries
        }

    def module_rule(self) -> dict[str, Any] | None:
        if not self.resolution.exclusions:
            return None
        return {
            "test": SOURCE_FILE_TEST,
            "exclude": [rule.pattern for rule in self.resolution.exclusions],
        }

    def to_dict(self) -> dict[str, Any]:
        rule = self.module_rule()
        return {
            "theme": self.theme.name,
            "env": dict(self.env),
            "distDir": self.dist_dir,
            "sassOptions": {
                "includePaths": list(self.include_paths),
                "prependData": self.prepend_data,
            },
            "resolve": {
                "alias": self.alias_map(),
                "extensions": list(self.extensions),
            },
            "module": {
                "rules": [rule] if rule else [],
            },
        }


class ThemeBuildService:
    """Resolve the build theme once and assemble its build configuration."""

    def __init__(
        self,
        settings: BuildSettings,
        registry: ThemeRegistry,
        fs: FileSystem | None = None,
    ) -> None:
        self._settings = settings
        self._registry = registry
        self._fs = fs or LocalFileSystem()

    @property
    def registry(self) -> ThemeRegistry:
        return self._registry

    def resolve_theme(self) -> ThemeIdentifier:
        return self._registry.resolve(self._settings.build_theme)

    def build(self, theme: ThemeIdentifier | None = None) -> BuildConfig:
        theme = theme or self.resolve_theme()
        root = self._settings.project_root
        brand_key = self._registry.derive_brand_key(theme)
        components = runtime_paths.components_root(root)

        resolution = resolve_components(
            components,
            theme,
            self._registry.all_themes(),
            fs=self._fs,
        )
        logger.info(
            "theme %s: %d components resolved, %d themes excluded",
            theme.name,
            len(resolution.candidates),
            len(resolution.exclusions),
        )
        for candidate in resolution.candidates:
            origin = "shared" if candidate.is_shared else candidate.theme.token
            logger.debug("  %s -> %s (%s)", candidate.component, candidate.path, origin)

        prelude = compile_style_prelude(
            runtime_paths.theme_variables_path(root, theme),
            runtime_paths.mixins_path(root),
            fs=self._fs,
        )
        return BuildConfig(
            theme=theme,
            brand_key=brand_key,
            resolution=resolution,
            dist_dir=runtime_paths.dist_dir(theme),
            include_paths=(str(runtime_paths.styles_root(root)),),
            prepend_data=prelude,
            env={ENV_THEME_KEY: theme.name, ENV_BRAND_KEY: brand_key},
        )


def merge_into_host(host_config: Mapping[str, Any], build: BuildConfig) -> dict[str, Any]:
    """Return a copy of ``host_config`` with the theme build settings merged in.

    Host aliases, extensions, rules and env values survive unless this build
    sets the same key.
    """
    merged: dict[str, Any] = copy.deepcopy(dict(host_config))
    ours = build.to_dict()

    merged["distDir"] = ours["distDir"]
    merged["env"] = {**_mapping(merged.get("env")), **ours["env"]}

    sass = _mapping(merged.get("sassOptions"))
    sass["includePaths"] = _unique(
        ours["sassOptions"]["includePaths"] + list(sass.get("includePaths") or [])
    )
    sass["prependData"] = ours["sassOptions"]["prependData"] + str(sass.get("prependData") or "")
    merged["sassOptions"] = sass

    resolve = _mapping(merged.get("resolve"))
    resolve["alias"] = {**_mapping(resolve.get("alias")), **ours["resolve"]["alias"]}
    resolve["extensions"] = _unique(
        ours["resolve"]["extensions"] + list(resolve.get("extensions") or [])
    )
    merged["resolve"] = resolve

    module = _mapping(merged.get("module"))
    module["rules"] = list(module.get("rules") or []) + ours["module"]["rules"]
    merged["module"] = module
    return merged


def _mapping(value: object) -> dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _unique(values: list[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result

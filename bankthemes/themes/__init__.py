"""Theme resolution exports."""

from bankthemes.themes.constants import DEFAULT_THEME, THEME_BRAND_KEYS
from bankthemes.themes.models import ExclusionRule, ResolutionEntry, ResolutionResult, ThemeIdentifier
from bankthemes.themes.registry import ThemeRegistry
from bankthemes.themes.resolver import resolve_components
from bankthemes.themes.service import BuildConfig, ThemeBuildService, merge_into_host

__all__ = [
    "DEFAULT_THEME",
    "THEME_BRAND_KEYS",
    "BuildConfig",
    "ExclusionRule",
    "ResolutionEntry",
    "ResolutionResult",
    "ThemeBuildService",
    "ThemeIdentifier",
    "ThemeRegistry",
    "merge_into_host",
    "resolve_components",
]

"""Closed theme set and build theme selection."""

from __future__ import annotations

from typing import Mapping

from bankthemes.errors import InvalidConfigurationError
from bankthemes.themes.constants import DEFAULT_THEME, THEME_BRAND_KEYS, THEME_ENV_VAR
from bankthemes.themes.models import ThemeIdentifier


class ThemeRegistry:
    """Holds the valid themes and resolves the one selected for a build."""

    def __init__(
        self,
        themes: Mapping[str, str] = THEME_BRAND_KEYS,
        default: str | None = None,
    ) -> None:
        if not themes:
            raise InvalidConfigurationError("Theme catalog is empty")
        self._themes: dict[str, ThemeIdentifier] = {
            token.strip().lower(): ThemeIdentifier(token=token.strip().lower(), brand_key=brand_key)
            for token, brand_key in themes.items()
        }
        if default is None:
            default = DEFAULT_THEME
            if default.lower() not in self._themes:
                default = next(iter(self._themes))
        default_token = default.strip().lower()
        if default_token not in self._themes:
            raise InvalidConfigurationError(
                f"Default theme {default!r} is not in the theme catalog",
                valid_values=self.valid_names(),
            )
        self._default = self._themes[default_token]

    @property
    def default(self) -> ThemeIdentifier:
        return self._default

    def all_themes(self) -> tuple[ThemeIdentifier, ...]:
        return tuple(self._themes.values())

    def valid_names(self) -> list[str]:
        return [theme.name for theme in self._themes.values()]

    def get(self, token: str) -> ThemeIdentifier | None:
        return self._themes.get((token or "").strip().lower())

    def resolve(self, raw_value: str | None) -> ThemeIdentifier:
        """Normalize a raw config value into a theme; blank selects the default."""
        cleaned = (raw_value or "").strip()
        if not cleaned:
            return self._default
        theme = self._themes.get(cleaned.lower())
        if theme is None:
            valid = self.valid_names()
            raise InvalidConfigurationError(
                f"Invalid {THEME_ENV_VAR}: {cleaned}. Use: {', '.join(valid)}",
                valid_values=valid,
            )
        return theme

    @staticmethod
    def derive_brand_key(theme: ThemeIdentifier) -> str:
        return theme.brand_key

"""Theme-aware component resolution.

Each immediate subdirectory of the components root is one component. For the
active theme, the resolver binds both import spellings of a component to a
single file, preferring ``<Name>/<theme>/`` over the shared ``<Name>/`` file:

    <Name>/<theme>/<Name>.tsx
    <Name>/<theme>/<Name>.ts
    <Name>/<theme>/index.tsx
    <Name>/<theme>/index.ts
    <Name>/<Name>.tsx
    <Name>/<Name>.ts

The first existing file wins. When several theme-specific files exist (for
example both ``Button.tsx`` and ``index.tsx``) the earlier one is chosen
without a warning; the order above is the contract.

Independently of the aliases, every theme other than the active one yields an
exclusion rule matching ``<root>/<any component>/<theme>/`` so that rejected
implementations never enter the module graph.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from bankthemes.errors import InvalidConfigurationError
from bankthemes.themes.constants import (
    COMPONENT_ALIAS_PREFIX,
    SHARED_CANDIDATE_NAMES,
    THEME_CANDIDATE_NAMES,
)
from bankthemes.themes.fs import FileSystem, LocalFileSystem
from bankthemes.themes.models import (
    CandidateFile,
    ExclusionRule,
    ResolutionEntry,
    ResolutionResult,
    ThemeIdentifier,
)

logger = logging.getLogger(__name__)


def resolve_components(
    components_root: Path,
    active_theme: ThemeIdentifier,
    all_themes: Iterable[ThemeIdentifier],
    fs: FileSystem | None = None,
) -> ResolutionResult:
    """Compute aliases and exclusion rules for ``active_theme``."""
    fs = fs or LocalFileSystem()
    themes = tuple(all_themes)
    if active_theme.token not in {theme.token for theme in themes}:
        raise InvalidConfigurationError(
            f"Active theme {active_theme.name} is not part of the theme set",
            valid_values=[theme.name for theme in themes],
        )

    if not fs.exists(components_root):
        logger.debug("components root %s does not exist; nothing to resolve", components_root)
        return ResolutionResult()

    entries: list[ResolutionEntry] = []
    selected: list[CandidateFile] = []
    for component in fs.list_dirs(components_root):
        candidate = select_candidate(components_root, component, active_theme, fs)
        if candidate is None:
            logger.debug("component %s has no implementation for %s", component, active_theme)
            continue
        selected.append(candidate)
        entries.extend(
            ResolutionEntry(alias_key=key, resolved_path=candidate.path)
            for key in alias_keys(component)
        )

    return ResolutionResult(
        entries=tuple(entries),
        exclusions=build_exclusion_rules(components_root, active_theme, themes),
        candidates=tuple(selected),
    )


def select_candidate(
    components_root: Path,
    component: str,
    theme: ThemeIdentifier,
    fs: FileSystem,
) -> CandidateFile | None:
    """Return the authoritative implementation of ``component`` for ``theme``."""
    component_dir = components_root / component
    theme_dir = component_dir / theme.token
    for template in THEME_CANDIDATE_NAMES:
        path = theme_dir / template.format(name=component)
        if fs.is_file(path):
            return CandidateFile(component=component, path=path, theme=theme)
    for template in SHARED_CANDIDATE_NAMES:
        path = component_dir / template.format(name=component)
        if fs.is_file(path):
            return CandidateFile(component=component, path=path)
    return None


def alias_keys(component: str) -> tuple[str, str]:
    """Bare and self-referential nested import spellings of a component."""
    return (
        f"{COMPONENT_ALIAS_PREFIX}/{component}",
        f"{COMPONENT_ALIAS_PREFIX}/{component}/{component}",
    )


def component_patterns(component: str, theme: ThemeIdentifier) -> list[str]:
    """Logical lookup specifiers for ``component``, theme-specific first."""
    return [
        f"{COMPONENT_ALIAS_PREFIX}/{component}/{theme.token}/{component}",
        f"{COMPONENT_ALIAS_PREFIX}/{component}/{component}",
    ]


def build_exclusion_rules(
    components_root: Path,
    active_theme: ThemeIdentifier,
    all_themes: Iterable[ThemeIdentifier],
) -> tuple[ExclusionRule, ...]:
    root = re.escape(components_root.as_posix().rstrip("/"))
    rules: list[ExclusionRule] = []
    for theme in all_themes:
        if theme.token == active_theme.token:
            continue
        pattern = f"{root}/[^/]+/{re.escape(theme.token)}/"
        rules.append(ExclusionRule(theme=theme, pattern=pattern))
    return tuple(rules)

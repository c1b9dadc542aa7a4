"""Theme build models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from bankthemes.themes.constants import SOURCE_FILE_TEST


@dataclass(frozen=True, slots=True)
class ThemeIdentifier:
    """One member of the closed theme set."""

    token: str
    brand_key: str

    @property
    def name(self) -> str:
        return self.token.upper()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class CandidateFile:
    """A concrete file that may implement a component."""

    component: str
    path: Path
    theme: ThemeIdentifier | None = None

    @property
    def is_shared(self) -> bool:
        return self.theme is None


@dataclass(frozen=True, slots=True)
class ResolutionEntry:
    """Alias binding a logical import path to a concrete file."""

    alias_key: str
    resolved_path: Path


@dataclass(frozen=True, slots=True)
class ExclusionRule:
    """Module filter keeping a rejected theme's files out of the build."""

    theme: ThemeIdentifier
    pattern: str
    test: str = SOURCE_FILE_TEST

    def matches(self, path: PurePath | str) -> bool:
        text = path.as_posix() if isinstance(path, PurePath) else str(path)
        if not re.search(self.test, text):
            return False
        return re.search(self.pattern, text) is not None


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Aliases and exclusions computed for one build."""

    entries: tuple[ResolutionEntry, ...] = ()
    exclusions: tuple[ExclusionRule, ...] = ()
    candidates: tuple[CandidateFile, ...] = field(default=(), compare=False)

    @property
    def aliases(self) -> dict[str, Path]:
        return {entry.alias_key: entry.resolved_path for entry in self.entries}

    def is_empty(self) -> bool:
        return not self.entries and not self.exclusions
